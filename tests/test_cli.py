"""
Tests for the command-line entry point.
"""

from nutrition_seed.cli import build_options, main, parse_args
from nutrition_seed.storage import SQLiteStorage


def sqlite_url(path):
    return f"sqlite:///{path}"


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = parse_args([])
        assert args.database is None
        assert args.config is None
        assert args.months is None
        assert args.edge_cases is None
        assert args.no_clear is False
        assert args.no_photos is False
        assert args.init_schema is False
        assert args.clear_only is False

    def test_flags(self):
        args = parse_args(["--months", "2", "--edge-cases", "--seed", "7", "--no-clear"])
        assert (args.months, args.edge_cases, args.seed, args.no_clear) == (2, True, 7, True)


class TestBuildOptions:
    """Tests for layering flags over a YAML file."""

    def test_flags_only(self):
        opts = build_options(parse_args(["--months", "2", "--no-photos", "--no-clear"]))
        assert opts.months_of_history == 2
        assert opts.download_photos is False
        assert opts.clear_existing is False

    def test_yaml_with_override(self, tmp_path):
        config = tmp_path / "seed.yaml"
        config.write_text("months_of_history: 4\ninclude_edge_cases: true\nseed: 5\n")

        opts = build_options(parse_args(["--config", str(config), "--months", "1"]))

        assert opts.months_of_history == 1
        assert opts.include_edge_cases is True
        assert opts.seed == 5
        assert opts.clear_existing is True


class TestMain:
    """Tests for main()."""

    def test_seed_run(self, tmp_path, capsys):
        db_path = tmp_path / "seed.db"
        code = main([
            "--database", sqlite_url(db_path), "--init-schema",
            "--months", "1", "--no-photos", "--seed", "1",
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert "Seed Summary" in out
        assert "Success!" in out

        storage = SQLiteStorage(str(db_path))
        try:
            assert storage.query("SELECT COUNT(*) AS n FROM goals")[0]["n"] == 2
        finally:
            storage.close()

    def test_clear_only(self, tmp_path, capsys):
        url = sqlite_url(tmp_path / "seed.db")
        assert main(["--database", url, "--init-schema", "--months", "1", "--no-photos", "--seed", "1"]) == 0

        assert main(["--database", url, "--clear-only"]) == 0
        assert "Cleared generated data (0 warnings)." in capsys.readouterr().out

        storage = SQLiteStorage(str(tmp_path / "seed.db"))
        try:
            assert storage.query("SELECT COUNT(*) AS n FROM log_entries")[0]["n"] == 0
        finally:
            storage.close()

    def test_unsupported_url(self, capsys):
        assert main(["--database", "mysql://localhost/db"]) == 1
        assert "Unsupported database URL" in capsys.readouterr().out

    def test_missing_config(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "nope.yaml")]) == 1
        assert capsys.readouterr().out.startswith("ERROR:")

    def test_missing_schema_reports_errors(self, tmp_path, capsys):
        """Seeding an empty database fails every step and exits non-zero."""
        code = main(["--database", sqlite_url(tmp_path / "empty.db"), "--months", "1", "--no-photos"])
        assert code == 1
        assert "Errors:" in capsys.readouterr().out
