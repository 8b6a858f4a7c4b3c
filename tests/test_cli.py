from pathlib import Path

from wiki2note.cli import apply_overrides, build_parser
from wiki2note.config.schema import Config


def test_parser_joins_query_words() -> None:
    args = build_parser().parse_args(["alan", "turing", "--no-fallback"])

    assert args.query == ["alan", "turing"]
    assert args.no_fallback is True
    assert args.verbose is False


def test_overrides_apply_vault_and_fallback(tmp_path) -> None:
    args = build_parser().parse_args(["--vault", str(tmp_path), "--no-fallback"])

    config = apply_overrides(Config(), args)

    assert config.notes.vault == Path(tmp_path)
    assert config.fallback.enabled is False


def test_fallback_stays_enabled_by_default() -> None:
    args = build_parser().parse_args([])

    assert apply_overrides(Config(), args).fallback.enabled is True
