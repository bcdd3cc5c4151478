"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    ExportOptions,
    get_environment,
    get_environment_info,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("XAML_SORT_RESOURCES", raising=False)
        assert get_environment(EnvVar.XAML_SORT_RESOURCES) is True

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("XAML_TEXT_ALIGNMENT_MODE", "style")
        result = get_environment(EnvVar.XAML_TEXT_ALIGNMENT_MODE, override="none")
        assert result == "none"

    @pytest.mark.unit
    def test_false_override_is_respected(self, monkeypatch):
        """A False override is not mistaken for a missing override."""
        monkeypatch.setenv("XAML_SORT_RESOURCES", "true")
        assert get_environment(EnvVar.XAML_SORT_RESOURCES, override=False) is False

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("XAML_IGNORE_FONT_FAMILY", value)
            assert get_environment(EnvVar.XAML_IGNORE_FONT_FAMILY) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("XAML_ENABLE_CACHE", value)
            assert get_environment(EnvVar.XAML_ENABLE_CACHE) is False

    @pytest.mark.unit
    def test_invalid_bool_returns_default(self, monkeypatch):
        """Unrecognized boolean strings fall back to the default."""
        monkeypatch.setenv("XAML_SORT_RESOURCES", "maybe")
        assert get_environment(EnvVar.XAML_SORT_RESOURCES) is True

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("XAML_DUPLICATE_SUFFIX", " copy")
        assert get_environment(EnvVar.XAML_DUPLICATE_SUFFIX) == " copy"

    @pytest.mark.unit
    def test_none_default_for_duplicate_suffix(self, monkeypatch):
        """Duplicate suffix defaults to None when not set."""
        monkeypatch.delenv("XAML_DUPLICATE_SUFFIX", raising=False)
        assert get_environment(EnvVar.XAML_DUPLICATE_SUFFIX) is None


class TestEnvironmentInfo:
    """Tests for metadata and introspection helpers."""

    @pytest.mark.unit
    def test_get_environment_info(self):
        """Info returns the EnvConfig for the member."""
        info = get_environment_info(EnvVar.XAML_ENABLE_CACHE)
        assert isinstance(info, EnvConfig)
        assert info.name == "XAML_ENABLE_CACHE"
        assert info.var_type is bool
        assert info.category == "runtime"

    @pytest.mark.unit
    def test_all_vars_have_description(self):
        """Every variable is documented."""
        for var in EnvVar:
            assert var.value.description

    @pytest.mark.unit
    def test_list_all(self):
        """Without a category every variable is returned."""
        assert list_environment_variables() == list(EnvVar)

    @pytest.mark.unit
    def test_list_by_category(self):
        """Category filter narrows the list."""
        styles = list_environment_variables("styles")
        assert set(styles) == {
            EnvVar.XAML_IGNORE_FONT_FAMILY,
            EnvVar.XAML_TEXT_ALIGNMENT_MODE,
        }

    @pytest.mark.unit
    def test_list_unknown_category(self):
        """Unknown categories yield nothing."""
        assert list_environment_variables("nonexistent") == []


class TestExportOptions:
    """Tests for ExportOptions resolution."""

    @pytest.mark.unit
    def test_defaults(self):
        """Defaults mirror the EnvVar defaults."""
        options = ExportOptions.from_environment()
        assert options.ignore_font_family is False
        assert options.text_alignment_mode == "style"
        assert options.sort_resources is True
        assert options.duplicate_suffix is None
        assert options.enable_cache is False

    @pytest.mark.unit
    def test_environment_values(self, monkeypatch):
        """Environment variables feed the options."""
        monkeypatch.setenv("XAML_IGNORE_FONT_FAMILY", "yes")
        monkeypatch.setenv("XAML_DUPLICATE_SUFFIX", "-dup")
        options = ExportOptions.from_environment()
        assert options.ignore_font_family is True
        assert options.duplicate_suffix == "-dup"

    @pytest.mark.unit
    def test_overrides_beat_environment(self, monkeypatch):
        """Keyword overrides win over environment values."""
        monkeypatch.setenv("XAML_ENABLE_CACHE", "true")
        options = ExportOptions.from_environment(enable_cache=False)
        assert options.enable_cache is False

    @pytest.mark.unit
    def test_get_option_by_host_name(self):
        """Host camelCase names resolve to fields."""
        options = ExportOptions(ignore_font_family=True, duplicate_suffix="~")
        assert options.get_option("ignoreFontFamily") is True
        assert options.get_option("duplicateSuffix") == "~"
        assert options.get_option("sort_resources") is True

    @pytest.mark.unit
    def test_get_option_unknown(self):
        """Unknown option names raise KeyError."""
        with pytest.raises(KeyError, match="Unknown option"):
            ExportOptions().get_option("noSuchOption")

    @pytest.mark.unit
    def test_options_are_frozen(self):
        """Options cannot change mid-session."""
        options = ExportOptions()
        with pytest.raises(ValueError):
            options.sort_resources = False
