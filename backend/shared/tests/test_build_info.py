import importlib
import subprocess
from unittest.mock import patch

import shared.build_info as build_info_module


class TestGitShortSha:
    def test_returns_git_output(self):
        with patch("subprocess.check_output", return_value="1a2b3c4\n"):
            assert build_info_module._git_short_sha() == "1a2b3c4"

    def test_returns_dev_when_git_not_found(self):
        with patch("subprocess.check_output", side_effect=FileNotFoundError):
            assert build_info_module._git_short_sha() == "dev"

    def test_returns_dev_outside_a_repository(self):
        with patch("subprocess.check_output", side_effect=subprocess.CalledProcessError(128, "git")):
            assert build_info_module._git_short_sha() == "dev"


class TestModuleLevelConstants:
    def test_values_read_from_env(self):
        with patch.dict("os.environ", {"APP_VERSION": "1.2.3", "GIT_COMMIT": "abc1234"}):
            importlib.reload(build_info_module)
            assert build_info_module.APP_VERSION == "1.2.3"
            assert build_info_module.GIT_COMMIT == "abc1234"
        importlib.reload(build_info_module)
