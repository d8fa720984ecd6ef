import json
import subprocess
import sys
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[1]


def _run(*args):
    return subprocess.run([sys.executable, str(ROOT / "cli.py"), *args],
                          cwd=ROOT, capture_output=True, text=True)


def test_cli_preview_writes_image(tmp_path):
    out = tmp_path / "world.png"
    proc = _run("preview", "--resolution", "0", "--seed", "test",
                "--out", str(out), "--width", "72", "--height", "36")
    assert proc.returncode == 0, proc.stderr
    assert out.exists()
    assert Image.open(out).size == (72, 36)


def test_cli_summary_prints_json():
    proc = _run("summary", "--resolution", "0", "--method", "tectonic")
    assert proc.returncode == 0, proc.stderr
    data = json.loads(proc.stdout)
    assert data["cells"] == 122


def test_cli_bad_height_map(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not a png")
    proc = _run("summary", "--resolution", "0", "--height-map", str(bad))
    assert proc.returncode == 2
    assert "height map" in proc.stderr
