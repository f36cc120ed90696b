from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

sys.path.insert(0, str(ROOT / "scripts"))
import feature_registry_check  # noqa: E402


def _env(**extra: str) -> dict[str, str]:
    env = {k: v for k, v in os.environ.items() if not k.startswith(("TS_", "TAILSCALE_", "ENVKNOB_"))}
    env.pop("PYTHONPATH", None)
    env.update(extra)
    return env


def test_print_envknobs_lists_set_knobs() -> None:
    proc = subprocess.run(
        [sys.executable, "scripts/print_envknobs.py", "--int", "TS_PORT"],
        cwd=ROOT,
        env=_env(TS_DISABLE_SSH_SERVER="1", TS_PORT="41641"),
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 0
    assert proc.stdout.splitlines() == [
        'envknob: TS_DISABLE_SSH_SERVER="true"',
        'envknob: TS_PORT="41641"',
    ]


def test_print_envknobs_exits_on_malformed_bool() -> None:
    proc = subprocess.run(
        [sys.executable, "scripts/print_envknobs.py"],
        cwd=ROOT,
        env=_env(TS_DISABLE_SSH_SERVER="banana"),
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 1
    assert "TS_DISABLE_SSH_SERVER" in proc.stderr
    assert "banana" in proc.stderr


def test_feature_registry_check_passes_on_repo_features(capsys) -> None:
    feature_registry_check.main(ROOT / "features")
    assert "FEATURE_CHECK_OK" in capsys.readouterr().out


def test_feature_registry_check_rejects_direct_env_access(tmp_path) -> None:
    (tmp_path / "sneaky.py").write_text(
        "import os\n"
        "router = None\n"
        "FLAG = os.getenv('TS_SNEAKY')\n"
        'FEATURE = {"key": "sneaky", "router": router, "enabled_env": "ENVKNOB_FEATURE_SNEAKY"}\n',
        encoding="utf-8",
    )
    with pytest.raises(SystemExit):
        feature_registry_check.main(tmp_path)


def test_feature_registry_check_rejects_missing_contract(tmp_path) -> None:
    (tmp_path / "incomplete.py").write_text('FEATURE = {"key": "incomplete"}\n', encoding="utf-8")
    with pytest.raises(SystemExit):
        feature_registry_check.main(tmp_path)


def test_main_logs_knob_snapshot_at_default_level() -> None:
    proc = subprocess.run(
        [sys.executable, "-c", "import main"],
        cwd=ROOT,
        env=_env(ENVKNOB_FEATURE_SSH="1", TS_DEBUG_SSH_POLICY_FILE="/tmp/p.json"),
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 0, proc.stderr
    lines = [ln for ln in proc.stderr.splitlines() if "envknob:" in ln]
    assert len(lines) == 1
    assert 'envknob: ENVKNOB_FEATURE_SSH="true"' in lines[0]
    assert "envknob_ng.knobs" in lines[0]
