from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest


def savefig(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(path, dpi=72, bbox_inches="tight")
    plt.close()


@pytest.fixture
def outputs_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A ./outputs directory holding two rendered figures and an extensionless file."""
    out = tmp_path / "outputs"

    plt.figure(figsize=(2, 2))
    plt.bar(["a", "b"], [1, 2], color="#007CB0")
    savefig(out / "cat.png")

    plt.figure(figsize=(2, 2))
    plt.plot([0, 1], [1, 0], color="#ED8B00")
    savefig(out / "dog.jpeg")

    (out / "notes").write_text("render log\n", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    return out
