import os
import pytest
from puzzle_core.packs import write_pack
from puzzle_core.state import Board, SOLVED
from search.config import SearchConfig, load_config


def test_defaults():
    cfg = load_config(None)
    assert cfg.start_board() == SOLVED
    assert cfg.goal_board() == Board((1, 3, 10, 4, 5, 2, 0, 7, 9, 11, 6, 8, 13, 14, 15, 12))
    assert cfg.heuristic == "squared_euclid"
    assert cfg.check_parity is True


def test_yaml_and_overrides(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text(
        "search:\n"
        "  goal: 1 2 3 4 5 6 7 8 9 10 11 12 13 14 0 15\n"
        "  heuristic: misplaced\n"
        "  node_limit: 500\n",
        encoding="utf-8",
    )
    cfg = load_config(str(p))
    assert cfg.goal_board().blank == 14
    assert cfg.node_limit == 500
    cfg2 = cfg.merged({"heuristic": "zero", "node_limit": None, "bogus": 1})
    assert cfg2.heuristic == "zero"
    assert cfg2.node_limit == 500


def test_unknown_key_rejected(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("search:\n  depth: 3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(p))


def test_explicit_config_fields():
    cfg = SearchConfig(progress_every=50)
    assert cfg.progress_every == 50


def test_board_ids_relative_to_config_file(tmp_path, monkeypatch):
    cfg_dir = tmp_path / "cfg"
    cfg_dir.mkdir()
    write_pack(str(cfg_dir / "p.txt"), [SOLVED.swapped(15, 14)])
    (cfg_dir / "run.yaml").write_text("search:\n  goal: p.txt#0\n", encoding="utf-8")
    other = tmp_path / "elsewhere"
    other.mkdir()
    monkeypatch.chdir(other)
    cfg = load_config(str(cfg_dir / "run.yaml"))
    assert cfg.goal_board().blank == 14


def test_repo_config_from_other_directory(tmp_path, monkeypatch):
    repo_cfg = os.path.join(os.path.dirname(__file__), "..", "configs", "search.yaml")
    repo_cfg = os.path.abspath(repo_cfg)
    monkeypatch.chdir(tmp_path)
    cfg = load_config(repo_cfg)
    assert cfg.goal_board() == Board((1, 3, 10, 4, 5, 2, 0, 7, 9, 11, 6, 8, 13, 14, 15, 12))
