"""Fixed theme and keyword vocabularies and the substring matcher."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

try:  # pragma: no cover
    from .io_utils import read_json
    from .schemas.config import VocabularyConfig
except ImportError:  # pragma: no cover
    from io_utils import read_json  # type: ignore
    from schemas.config import VocabularyConfig  # type: ignore

THEME_TERMS = (
    "働き方",
    "キャリア",
    "理学療法",
    "歴史",
    "メンタルヘルス",
    "精神医療",
    "教育",
    "研究",
    "起業",
    "ビジネス",
    "哲学",
    "科学",
    "エビデンス",
    "評価",
    "治療",
    "公衆衛生",
    "地域包括ケア",
    "高齢化",
    "介護",
    "発達障害",
    "認知症",
    "うつ",
    "ストレス",
    "スポーツ",
    "リハビリテーション",
    "身体",
    "運動療法",
)

KEYWORD_TERMS = (
    "セラピスト",
    "理学療法士",
    "PT",
    "OT",
    "作業療法士",
    "患者",
    "治療",
    "評価",
    "介入",
    "リハビリ",
    "病院",
    "施設",
    "地域",
    "在宅",
    "訪問",
    "エビデンス",
    "EBM",
    "研究",
    "論文",
    "学術",
    "教育",
    "養成",
    "大学",
    "協会",
    "資格",
    "メンタル",
    "精神",
    "心理",
    "ストレス",
    "ウェルビーイング",
    "起業",
    "独立",
    "フリーランス",
    "コンサル",
    "運動",
    "身体",
    "機能",
    "動作",
    "姿勢",
)

DEFAULT_VOCABULARY = VocabularyConfig(themes=THEME_TERMS, keywords=KEYWORD_TERMS)


def match_terms(text: str, vocabulary: Iterable[str]) -> list[str]:
    """Return the vocabulary terms found in ``text``.

    Matching is case-sensitive substring containment with no tokenisation, so a
    term embedded in a longer word still counts. The result holds each term once,
    in vocabulary order.
    """
    found: dict[str, None] = {}
    for term in vocabulary:
        if term in text:
            found[term] = None
    return list(found)


def load_vocabulary(path: Path) -> VocabularyConfig:
    """Load a vocabulary override from a ``{"themes": [...], "keywords": [...]}`` file."""
    try:
        return VocabularyConfig.model_validate(read_json(path))
    except ValidationError as exc:
        raise ValueError(f"Invalid vocabulary file {path}") from exc
