import pytest

from config import FPS_DEFAULT
from main import parse_args


def test_defaults():
    args = parse_args([])
    assert args.fps == FPS_DEFAULT
    assert args.seed is None
    assert not args.debug
    assert args.log_level == "WARNING"


def test_options():
    args = parse_args(["--fps", "0", "--seed", "5", "--debug", "--log-level", "DEBUG"])
    assert (args.fps, args.seed, args.debug, args.log_level) == (0, 5, True, "DEBUG")


@pytest.mark.parametrize("bad", ["-1", "fast"])
def test_rejects_bad_fps(bad):
    with pytest.raises(SystemExit):
        parse_args(["--fps", bad])
