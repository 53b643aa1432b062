"""Tests for TOML configuration loading."""

import logging

import pytest

from vcf_decoder import VCFParser
from vcf_decoder.config import (
    ConfigValidationError,
    ParserConfig,
    load_config,
    validate_config,
)


class TestParserConfig:
    """Tests for ParserConfig defaults."""

    def test_defaults(self):
        config = ParserConfig()
        assert config.strict is True
        assert config.log_level == "WARNING"
        assert config.decode_breakends is True


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_values(self, tmp_path):
        path = tmp_path / "decoder.toml"
        path.write_text('[vcf_decoder]\nstrict = false\nlog_level = "debug"\n')
        config = load_config(path)
        assert config.strict is False
        assert config.log_level == "DEBUG"
        assert config.decode_breakends is True

    def test_missing_section_gives_defaults(self, tmp_path):
        path = tmp_path / "decoder.toml"
        path.write_text("[other]\nvalue = 1\n")
        assert load_config(path) == ParserConfig()

    def test_overrides_win(self, tmp_path):
        path = tmp_path / "decoder.toml"
        path.write_text("[vcf_decoder]\nstrict = true\n")
        assert load_config(path, overrides={"strict": False}).strict is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_config(tmp_path / "absent.toml")

    def test_unknown_keys_are_ignored_with_warning(self, tmp_path, caplog):
        path = tmp_path / "decoder.toml"
        path.write_text("[vcf_decoder]\nbatch_size = 10\n")
        with caplog.at_level(logging.WARNING, logger="vcf_decoder"):
            config = load_config(path)
        assert config == ParserConfig()
        assert "batch_size" in caplog.text

    def test_from_config_builds_lenient_parser(self, tmp_path, example_header):
        path = tmp_path / "decoder.toml"
        path.write_text("[vcf_decoder]\nstrict = false\n")
        parser = VCFParser.from_config(example_header, load_config(path))
        assert parser.strict is False
        assert parser.parse_line("20\t1\t.\tA\tG\t.\t.").info == {}


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid(self):
        validate_config({"strict": True, "log_level": "info", "decode_breakends": False})

    @pytest.mark.parametrize(
        "config_dict,message",
        [
            ({"strict": "yes"}, "strict must be a boolean"),
            ({"decode_breakends": 1}, "decode_breakends must be a boolean"),
            ({"log_level": 10}, "log_level must be a string"),
            ({"log_level": "LOUD"}, "log_level must be one of"),
        ],
    )
    def test_invalid(self, config_dict, message):
        with pytest.raises(ConfigValidationError, match=message):
            validate_config(config_dict)
