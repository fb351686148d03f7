from __future__ import annotations

"""
Unit tests for the message catalogue.
"""

import json

import pytest

from fuzzel_pass.utils.i18n import I18n, detect_locale


@pytest.fixture
def english():
    return I18n("en")


def test_english_catalogue_is_loaded(english):
    assert english.is_loaded
    assert english.locale == "en"
    assert english.t("cli.status.cancelled") == "Selection cancelled."


def test_interpolation(english):
    assert english.t("cli.errors.failed", error="boom") == "ERROR: boom"


def test_bad_placeholders_return_template(english):
    assert english.t("cli.errors.failed", wrong="x") == "ERROR: {error}"


def test_missing_key_falls_back(english):
    assert english.t("does.not.exist") == "does.not.exist"
    assert english.t("does.not.exist", default="fallback") == "fallback"


def test_partial_catalogue_is_layered_on_english():
    spanish = I18n("es")

    assert spanish.locale == "es"
    assert spanish.t("cli.status.cancelled") == "Selección cancelada."
    # Not translated: served from the English catalogue
    assert spanish.t("cli.errors.failed", error="x") == "ERROR: x"


def test_unknown_locale_uses_english():
    manager = I18n("xx")

    assert manager.is_loaded
    assert manager.locale == "en"
    assert manager.t("cli.status.cancelled") == "Selection cancelled."


def test_missing_catalogues_are_not_fatal(tmp_path):
    manager = I18n("en", locales_dir=str(tmp_path))

    assert not manager.is_loaded
    assert manager.t("cli.status.cancelled") == "cli.status.cancelled"


def test_corrupt_catalogue_is_ignored(tmp_path):
    (tmp_path / "en.json").write_text(json.dumps({"a": {"b": "English"}}), encoding="utf-8")
    (tmp_path / "de.json").write_text("{not json", encoding="utf-8")

    manager = I18n("de", locales_dir=str(tmp_path))

    assert manager.locale == "en"
    assert manager.t("a.b") == "English"


@pytest.mark.parametrize(
    "environ, expected",
    [
        ({"LANG": "es_ES.UTF-8"}, "es"),
        ({"LC_ALL": "de_DE@euro", "LANG": "es_ES.UTF-8"}, "de"),
        ({"LC_MESSAGES": "fr_FR", "LANG": "es_ES"}, "fr"),
        ({"LANG": "C.UTF-8"}, "en"),
        ({"LANG": "POSIX"}, "en"),
        ({"LC_ALL": "", "LANG": "es"}, "es"),
        ({}, "en"),
    ],
)
def test_detect_locale(environ, expected):
    assert detect_locale(environ) == expected
