import pygame
import pytest

from tilerunner.app import FIXED_TIME_STEP, _fixed_steps, load_window_icon, main


def test_load_window_icon_round_trip(tmp_path):
    source = pygame.Surface((16, 24))
    source.fill((10, 20, 30))
    path = tmp_path / "icon.png"
    pygame.image.save(source, str(path))
    icon = load_window_icon(path)
    assert icon.get_size() == (16, 24)
    assert icon.get_at((3, 3))[:3] == (10, 20, 30)


def test_missing_icon_exits_with_status_one(tmp_path):
    with pytest.raises(SystemExit) as info:
        load_window_icon(tmp_path / "missing.png")
    assert info.value.code == 1


def test_no_elapsed_time_runs_no_steps():
    assert _fixed_steps(0.0, 0.0) == (0, 0.0)


def test_partial_step_is_carried():
    count, rest = _fixed_steps(0.0, FIXED_TIME_STEP / 2)
    assert count == 0
    assert rest == pytest.approx(FIXED_TIME_STEP / 2)


@pytest.mark.parametrize("elapsed", [0.001, 0.05, 0.25, 1.0])
def test_steps_account_for_all_time(elapsed):
    count, rest = _fixed_steps(0.004, elapsed)
    assert 0.0 <= rest < FIXED_TIME_STEP
    assert count * FIXED_TIME_STEP + rest == pytest.approx(0.004 + elapsed)


def test_three_steps_with_remainder():
    count, rest = _fixed_steps(0.0, FIXED_TIME_STEP * 3 + FIXED_TIME_STEP / 4)
    assert count == 3
    assert rest == pytest.approx(FIXED_TIME_STEP / 4)


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "tilerunner" in capsys.readouterr().out


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2