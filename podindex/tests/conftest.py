"""Shared fixtures for the podindex tests."""

import sys
from pathlib import Path

import pytest
from loguru import logger

SAMPLE_EPISODES = {
    "0.md": (
        "# 第0回\n"
        "\n"
        "## サマリー\n"
        "> この番組ではセラピストの働き方とキャリアを考えます。\n"
        "理学療法士の教育についても話します。\n"
        "\n"
        "## 番組について\n"
        "### ◆ 番組の目的\n"
        "### ◆ 今後の展開\n"
    ),
    "1.md": (
        "# 第1回\n"
        "\n"
        "## サマリー\n"
        "理学療法士のキャリアと教育、大学での研究について。\n"
        "\n"
        "## 理学療法士のキャリアを考える\n"
        "### ◆ 養成校の現状\n"
        "論文を読む習慣とエビデンス。\n"
    ),
    "2.md": (
        "## サマリー\n"
        "認知症と介護、在宅での訪問リハビリ。\n"
        "## 在宅医療の現場\n"
        "### 訪問の実際\n"
    ),
    "2-1.md": (
        "## サマリー\n"
        "在宅と訪問リハビリの続き。介護と認知症の家族支援。\n"
        "## 在宅医療の現場 後編\n"
    ),
    "番外編-1.md": (
        "## サマリー\n"
        "フリーランスとして起業・独立したセラピストの話。\n"
        "## 起業の裏側\n"
    ),
    "README.md": "# README\n理学療法士 セラピスト 教育\n",
    "notes.txt": "理学療法士のメモ\n",
}


@pytest.fixture(autouse=True)
def _reset_logger():
    """Keep loguru writing to the real stderr between tests."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="INFO")


@pytest.fixture()
def corpus_dir(tmp_path: Path) -> Path:
    source = tmp_path / "episodes"
    source.mkdir()
    for name, content in SAMPLE_EPISODES.items():
        (source / name).write_text(content, encoding="utf-8")
    return source
