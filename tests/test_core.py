import logging

import pytest

from core.config import Settings
from core.errors import (
    AppError,
    AppErrorException,
    EmptyCorpusError,
    Err,
    ErrorCode,
    Ok,
    business_error,
    collect_results,
    empty_corpus,
    exception_for,
    invalid_deck,
    raise_result,
)
from core.logging import LoggerRegistry, configure_logging, engine_logger, sampler_logger
from languages import get_module, list_languages


# --- errors --------------------------------------------------------------------

def test_ok_and_err_unwrap():
    assert Ok(2).unwrap() == 2
    assert Ok(2).is_ok() and not Ok(2).is_err()
    failed = empty_corpus(0)
    assert failed.is_err() and not failed.is_ok()
    assert failed.unwrap_err().code is ErrorCode.E5030_EMPTY_CORPUS
    with pytest.raises(ValueError):
        failed.unwrap()


def test_collect_results_splits_values_and_errors():
    values, errors = collect_results([Ok(1), empty_corpus(2), Ok(3)])
    assert values == [1, 3]
    assert [e.code for e in errors] == [ErrorCode.E5030_EMPTY_CORPUS]


def test_builders_fill_metadata_and_context():
    error = empty_corpus(3, origin="sampler").unwrap_err()

    assert error.code.category == "business"
    assert error.metadata == {"deck_count": 3}
    assert error.context.origin == "sampler"
    assert str(error).startswith("[E5030_EMPTY_CORPUS] No tasks available across 3 deck(s)")


def test_invalid_deck_drops_missing_metadata():
    cause = KeyError("tasks")
    error = invalid_deck("tasks missing", cause=cause).unwrap_err()

    assert error.code.category == "validation"
    assert error.cause is cause
    assert error.metadata == {}
    assert error.message == "Invalid deck record: tasks missing"


def test_raise_result_picks_specific_exception():
    assert raise_result(Ok("task")) == "task"
    with pytest.raises(EmptyCorpusError):
        raise_result(empty_corpus(0))
    with pytest.raises(AppErrorException) as exc:
        raise_result(business_error("nope"))
    assert type(exc.value) is AppErrorException
    assert exc.value.code is ErrorCode.E5000_BUSINESS_GENERIC
    assert isinstance(exception_for(AppError(ErrorCode.E5030_EMPTY_CORPUS, "x")), EmptyCorpusError)


def test_err_matches_by_pattern():
    match Err(AppError(ErrorCode.E2000_VALIDATION_GENERIC, "x")):
        case Ok(_):
            pytest.fail("matched Ok")
        case Err(error):
            assert error.message == "x"


# --- config --------------------------------------------------------------------

def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("RECENCY_CAPACITY", "12")
    monkeypatch.setenv("DRILL_LANGUAGE", "es")

    s = Settings()

    assert s.RECENCY_CAPACITY == 12
    assert s.OPTION_COUNT == 6
    assert s.BLANK_MARKER == "___"


# --- languages -----------------------------------------------------------------

def test_spanish_module_registered():
    es = get_module("es")
    assert es.is_clitic("LO")
    assert not es.is_clitic("mos")
    assert es.is_ending_drill("verbs.endings.preterite")
    assert not es.is_ending_drill("")
    assert "¿" in es.punctuation
    assert {"code": "es", "name": "Spanish", "nativeName": "Español"} in list_languages()


def test_unknown_language_raises():
    with pytest.raises(ValueError):
        get_module("xx")


# --- logging -------------------------------------------------------------------

def test_configure_logging_sets_root_level():
    configure_logging(level="debug", json_logs=True)
    assert logging.getLogger().level == logging.DEBUG
    configure_logging(level="INFO")
    assert logging.getLogger().level == logging.INFO


def test_domain_loggers_are_cached():
    assert engine_logger() is LoggerRegistry.get("engine")
    assert sampler_logger() is not engine_logger()
