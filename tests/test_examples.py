import runpy
from pathlib import Path

CLUB_NIGHT = Path(__file__).parent.parent / "examples" / "club_night.py"


def test_club_night_imports_after_path_setup():
    lines = CLUB_NIGHT.read_text().splitlines()
    path_setup = next(
        i for i, line in enumerate(lines) if line.startswith("sys.path.insert")
    )
    package_imports = [
        i for i, line in enumerate(lines) if line.startswith("from rackpairing")
    ]

    assert package_imports
    assert min(package_imports) > path_setup


def test_club_night_runs(capsys):
    runpy.run_path(str(CLUB_NIGHT), run_name="__main__")

    assert "0 violations" in capsys.readouterr().out
