"""Unit tests for accent and case folding."""

import pytest

from mobility_import.utils.text import fold_accents, normalize_key


class TestFoldAccents:
    """Tests for fold_accents function."""

    def test_removes_spanish_accents(self):
        """Test that common Spanish diacritics are removed."""
        assert fold_accents("Ubicación") == "Ubicacion"
        assert fold_accents("Título y código") == "Titulo y codigo"
        assert fold_accents("Fernández Ruiz") == "Fernandez Ruiz"

    def test_removes_tilde_and_diaeresis(self):
        """Test that ñ and ü fold to their base letters."""
        assert fold_accents("Peñíscola") == "Peniscola"
        assert fold_accents("pingüino") == "pinguino"

    def test_preserves_case(self):
        """Test that case is left to the caller."""
        assert fold_accents("ÁNGEL") == "ANGEL"

    def test_handles_precomposed_and_decomposed_input(self):
        """Test that NFC and NFD spellings fold to the same string."""
        precomposed = "Delegación"
        decomposed = "Delegacio\u0301n"
        assert fold_accents(precomposed) == fold_accents(decomposed) == "Delegacion"

    def test_empty_string(self):
        """Test that empty input yields empty output."""
        assert fold_accents("") == ""

    @pytest.mark.parametrize(
        "text",
        ["", "plain", "Ubicación", "Ñandú", "Crème brûlée", "a\u0301\u0301", "数据"],
    )
    def test_idempotent(self, text):
        """Test that folding twice equals folding once."""
        once = fold_accents(text)
        assert fold_accents(once) == once


class TestNormalizeKey:
    """Tests for normalize_key function."""

    def test_lowercases_trims_and_folds(self):
        """Test the full comparison key transformation."""
        assert normalize_key("  Fecha Inicio ") == "fecha inicio"
        assert normalize_key("UBICACIÓN") == "ubicacion"

    def test_case_and_accent_folding_commute(self):
        """Test that lowercasing and folding can be applied in either order."""
        text = "Título Y CÓDIGO"
        assert fold_accents(text).lower() == fold_accents(text.lower())

    def test_empty_string(self):
        """Test that empty input yields empty output."""
        assert normalize_key("") == ""
