from gameoflife import cli


def test_headless_run(capsys):
    args = cli.build_parser().parse_args(
        ["headless", "--width", "100", "--height", "50", "--cell-size", "10",
         "--seed", "3", "--generations", "5", "--workers", "2"])
    report = cli.run_headless(cli.config_from_args(args), args.generations)
    assert (report["rows"], report["cols"]) == (5, 10)
    assert report["generations"] == 5
    assert "Final live cells" in capsys.readouterr().out


def test_invalid_config_exits_2(capsys):
    assert cli.main(["headless", "--workers", "0"]) == 2
    assert "at least one worker" in capsys.readouterr().err


def test_benchmark_then_analyze(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    assert cli.main(["benchmark", "--sizes", "16", "--workers", "1", "2",
                     "--generations", "1", "--out", str(out), "--quiet"]) == 0
    assert out.exists()
    assert cli.main(["analyze", "--csv", str(out)]) == 0
    assert (tmp_path / "parallel_dashboard.png").exists()


def test_analyze_missing_data(tmp_path):
    assert cli.main(["analyze", "--csv", str(tmp_path / "missing.csv")]) == 1


def record_window(monkeypatch):
    seen = []

    def fake_run_window(config):
        seen.append(config)
        return 0

    monkeypatch.setattr(cli, "run_window", fake_run_window)
    return seen


def test_run_is_default_command(monkeypatch):
    seen = record_window(monkeypatch)
    assert cli.main(["--workers", "4", "--seed", "7"]) == 0
    assert cli.main([]) == 0
    assert cli.main(["-v", "--delay", "100"]) == 0
    assert [c.workers for c in seen] == [4, 8, 8]
    assert seen[0].seed == 7
    assert seen[2].frame_delay_ms == 100


def test_explicit_run_command(monkeypatch):
    seen = record_window(monkeypatch)
    assert cli.main(["run", "--cell-size", "20"]) == 0
    assert seen[0].cell_size == 20


def test_with_default_command():
    assert cli.with_default_command([]) == ["run"]
    assert cli.with_default_command(["--workers", "2"]) == ["run", "--workers", "2"]
    assert cli.with_default_command(["-v", "--seed", "1"]) == ["-v", "run", "--seed", "1"]
    assert cli.with_default_command(["headless", "--show"]) == ["headless", "--show"]
    assert cli.with_default_command(["--help"]) == ["--help"]


def test_benchmark_bad_size_exits_2(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    assert cli.main(["benchmark", "--sizes", "0", "--generations", "1", "--out", str(out), "--quiet"]) == 2
    assert "grid sizes must be positive" in capsys.readouterr().err
    assert not out.exists()
