"""Spanish clitic pronouns and drill markers."""

# Reflexive and object pronouns that fuse onto infinitives, gerunds and
# affirmative imperatives (dáselo, levantarme, diciéndole)
CLITICS_ES = frozenset({
    "me", "te", "se", "nos", "os",
    "lo", "la", "los", "las",
    "le", "les",
})

# Task types whose answer is a verb ending spliced onto the stem
ENDING_DRILL_MARKERS_ES = ("verbs.endings",)

# Opening marks are part of Spanish punctuation
PUNCTUATION_ES = ",.;:!?¿¡\"'"
