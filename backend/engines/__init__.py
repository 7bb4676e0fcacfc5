from engines.normalizer import normalize
from engines.validator import AnswerValidator, is_correct
from engines.sampler import Sampler, RotationQueue, RecencyWindow
from engines.options import OptionBuilder, dedupe_options
from engines.affixes import AffixSuppressor, BlockedAnswerSet
from engines.session import ExerciseSession, Presentation, SubmissionResult, PhraseParts

__all__ = [
    "normalize",
    "AnswerValidator",
    "is_correct",
    "Sampler",
    "RotationQueue",
    "RecencyWindow",
    "OptionBuilder",
    "dedupe_options",
    "AffixSuppressor",
    "BlockedAnswerSet",
    "ExerciseSession",
    "Presentation",
    "SubmissionResult",
    "PhraseParts",
]
