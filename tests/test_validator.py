from conftest import make_task
from engines.validator import AnswerValidator, is_correct


def test_exact_match_after_normalization():
    task = make_task("t1", acceptable_answers=["vas"])
    assert is_correct(task, "  Vás ")
    assert not is_correct(task, "vaas")


def test_any_accepted_answer_matches():
    task = make_task("t1", acceptable_answers=["se lo", "selo"])
    validator = AnswerValidator()
    assert validator.is_correct(task, "SE  LO")
    assert validator.is_correct(task, "selo")
    assert not validator.is_correct(task, "se")


def test_no_accepted_answers_is_never_correct():
    task = make_task("t1", acceptable_answers=[])
    assert not task.is_answerable
    assert make_task("t2").is_answerable
    for answer in ["", "   ", "anything", None]:
        assert not is_correct(task, answer)


def test_no_partial_credit():
    task = make_task("t1", acceptable_answers=["hablamos"])
    assert not is_correct(task, "hablamo")
    assert not is_correct(task, "hablamos!")
