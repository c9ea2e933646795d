"""Search Result - Standardized Result Format

검색 API 응답(SearchHit), 가격 근거(PriceEvidence), 정렬 대상(RankedResult)을 정의합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


PRICE_NOT_FOUND = "Price not found"


class PriceSource(str, Enum):
    """가격 출처

    UI 아이콘과 정렬 우선순위가 이 값으로 결정됩니다.
    """

    NONE = "none"  # 가격 없음
    SNIPPET = "snippet"  # 검색 스니펫에서 추출
    WEBPAGE = "webpage"  # 링크된 웹페이지에서 추출


@dataclass(frozen=True)
class SearchHit:
    """검색 API 결과 한 건 (title, snippet, link, displayLink)"""

    title: str = ""
    snippet: str = ""
    link: str = ""
    display_link: str = ""

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "SearchHit":
        """검색 API의 item(dict)에서 필요한 필드만 추출"""
        return cls(
            title=item.get("title") or "",
            snippet=item.get("snippet") or "",
            link=item.get("link") or "",
            display_link=item.get("displayLink") or "",
        )


@dataclass(frozen=True)
class PriceEvidence:
    """가격 근거 (NoPrice | FromSnippet | FromWebpage)

    한 번 정해진 출처는 다시 계산하지 않습니다.
    """

    source: PriceSource = PriceSource.NONE
    display_price: Optional[str] = None

    @classmethod
    def no_price(cls) -> "PriceEvidence":
        return cls()

    @classmethod
    def from_snippet(cls, display_price: str) -> "PriceEvidence":
        return cls(source=PriceSource.SNIPPET, display_price=display_price)

    @classmethod
    def from_webpage(cls, display_price: str) -> "PriceEvidence":
        return cls(source=PriceSource.WEBPAGE, display_price=display_price)

    @property
    def has_price(self) -> bool:
        return self.source is not PriceSource.NONE

    @property
    def label(self) -> str:
        """UI 표시용 가격 문자열"""
        return self.display_price if self.has_price and self.display_price else PRICE_NOT_FOUND


@dataclass(frozen=True)
class RankedResult:
    """SearchHit + PriceEvidence"""

    hit: SearchHit
    evidence: PriceEvidence = field(default_factory=PriceEvidence.no_price)

    @property
    def has_price(self) -> bool:
        return self.evidence.has_price

    @property
    def price_source(self) -> PriceSource:
        return self.evidence.source

    @property
    def display_price(self) -> str:
        return self.evidence.label
