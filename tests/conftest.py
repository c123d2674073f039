"""
Test configuration for LaterLens.

Provides HTML documents with known shapes so locator decisions can be
asserted exactly, plus the usual configuration fixtures.
"""

# Standard library imports
import logging
from pathlib import Path
from typing import Callable, List

# Third-party imports
import pytest
import structlog
from bs4 import BeautifulSoup

# Local imports
from laterlens.config import ExtractionConfig
from laterlens.extractor import ContentExtractor
from laterlens.observability import MetricsRecorder

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


# ============================================================================
# Document Builders
# ============================================================================

# Every word has exactly six letters so paragraph lengths are predictable.
SIX_LETTER_WORDS = (
    "garden", "bridge", "forest", "winter", "summer", "season", "market", "valley",
    "island", "harbor", "meadow", "farmer", "potter", "weaver", "orchid", "lumber",
    "timber", "canyon", "desert", "planet", "rocket", "signal", "thread", "basket",
    "candle", "mirror", "window", "ladder", "tunnel", "museum", "school", "doctor",
    "nurses", "rivers", "stones", "fields", "spring", "autumn", "cotton", "silver",
)  # fmt: skip

WORDS_PER_PARAGRAPH = 80
WORDS_PER_SENTENCE = 16


def paragraph_words(seed: int) -> List[str]:
    """Five sentences of sixteen words; no word repeats within 40 positions."""
    words = []
    for i in range(WORDS_PER_PARAGRAPH):
        word = SIX_LETTER_WORDS[(seed * 13 + i * 3) % len(SIX_LETTER_WORDS)]
        if i % WORDS_PER_SENTENCE == 0:
            word = word.capitalize()
        if i % WORDS_PER_SENTENCE == WORDS_PER_SENTENCE - 1:
            word += "."
        words.append(word)
    return words


def plain_paragraph(seed: int) -> str:
    return "<p>" + " ".join(paragraph_words(seed)) + "</p>"


def tokenized_paragraph(seed: int) -> str:
    """A paragraph whose words are each wrapped in a span, as reading-aid sites do."""
    spans = [f'<span class="tok">{word}</span>' for word in paragraph_words(seed)]
    return "<p>" + " ".join(spans) + "</p>"


def article_body(paragraph: Callable[[int], str]) -> str:
    """Two headings and five paragraphs, with an ad block in between, without inter-tag whitespace."""
    return "".join(
        [
            "<h2>Field notes</h2>",
            paragraph(1),
            paragraph(2),
            '<div class="ad-banner">Subscribe now click here</div>',
            "<h2>Later results</h2>",
            paragraph(3),
            paragraph(4),
            paragraph(5),
        ]
    )


def page(body: str, title: str = "Test Article", description: str = "Sample article for testing") -> str:
    return (
        "<!DOCTYPE html><html><head>"
        f"<title>{title}</title>"
        f'<meta name="description" content="{description}">'
        "<script>window.tracking = true;</script>"
        "</head><body>"
        f"{body}"
        "</body></html>"
    )


# ============================================================================
# HTML Fixtures
# ============================================================================


@pytest.fixture
def tokenized_article_html() -> str:
    """
    Article whose markup outweighs its text.

    Text density stays below its threshold, so the semantic ``<article>``
    candidate (about 22.4) beats the structural one (about 21.6).
    """
    return page(
        '<nav class="site-nav"><a href="/">Home</a><a href="/about">About</a></nav>'
        '<div class="page">'
        f"<article>{article_body(tokenized_paragraph)}</article>"
        '<aside class="sidebar">Popular this week: newsletter signup and more.</aside>'
        "</div>"
        "<footer>Copyright footer</footer>"
    )


@pytest.fixture
def plain_article_html() -> str:
    """The same article with plain paragraph markup, where text density dominates."""
    return page(f'<div class="page"><article>{article_body(plain_paragraph)}</article></div>')


@pytest.fixture
def short_page_html() -> str:
    return page(
        "<div>Short.</div>",
        title="Tiny page",
        description="A page with almost nothing on it.",
    )


@pytest.fixture
def korean_article_html() -> str:
    paragraphs = [
        "서울의 봄은 짧지만 아름답다. 사람들은 주말마다 공원에 모여 꽃을 구경하고 사진을 찍으며 시간을 보낸다. "
        "올해는 개화 시기가 예년보다 일주일 정도 빨라져 많은 시민들이 놀라움을 표했다.",
        "전문가들은 기후 변화가 이러한 현상의 주요 원인이라고 분석한다. 평균 기온이 꾸준히 오르면서 "
        "식물의 생장 주기도 함께 앞당겨지고 있다는 설명이다. 이런 흐름은 앞으로도 이어질 가능성이 높다.",
        "농업 분야에서도 변화가 감지되고 있다. 일부 농가는 파종 시기를 조정하거나 더위에 강한 품종으로 "
        "작물을 바꾸는 등 새로운 환경에 적응하기 위한 노력을 기울이고 있다.",
        "지방 정부는 도시 열섬 현상을 줄이기 위해 가로수를 늘리고 옥상 정원을 조성하는 사업을 추진하고 있다. "
        "이 사업은 주민들의 건강과 생활 환경을 개선하는 데 도움이 될 것으로 기대된다.",
        "한편 관광 업계는 축제 일정을 앞당기는 방안을 검토하고 있다. 꽃이 일찍 피면 축제 기간에 정작 "
        "볼거리가 줄어들기 때문이다. 여러 지역이 날씨 예보를 참고해 유연하게 일정을 정하고 있다.",
        "시민들은 변화하는 계절에 대해 다양한 의견을 내놓는다. 어떤 이는 따뜻한 날씨를 반기지만, 다른 이들은 "
        "생태계에 미칠 영향을 걱정한다. 분명한 것은 우리 모두가 이 변화에 관심을 가져야 한다는 점이다.",
    ]
    body = "<h2>봄꽃 개화 시기의 변화</h2>" + "".join(f"<p>{p}</p>" for p in paragraphs[:3])
    body += "<h2>지역 사회의 대응</h2>" + "".join(f"<p>{p}</p>" for p in paragraphs[3:])
    return page(f"<article>{body}</article>", title="봄꽃 소식", description="개화 시기 변화에 대한 기사")


@pytest.fixture
def rich_article_html() -> str:
    """Article carrying every kind of structured content."""
    return page(
        """
        <main>
          <h1>Building a Garden Pond</h1>
          <p>A small pond brings birds, insects and the sound of water into an ordinary back garden.
             It is also easier to build than most people expect.</p>
          <h2>Materials</h2>
          <ul>
            <li>Flexible pond liner</li>
            <li>Underlay or old carpet</li>
            <li>Edging stones</li>
          </ul>
          <h3>Digging</h3>
          <p>Mark the outline with a hose, then dig in shelves so that plants can sit at different depths.
             Keep the deepest part at least sixty centimetres down to protect wildlife in winter.</p>
          <ol>
            <li>Remove sharp stones</li>
            <li>Lay the underlay</li>
          </ol>
          <blockquote>The best ponds are the ones that look as if they have always been there.</blockquote>
          <figure>
            <img src="pond.jpg" alt="Finished pond with marginal plants">
            <figcaption>The pond after one summer</figcaption>
          </figure>
          <p>Fill the pond slowly with rainwater where possible, because tap water encourages algae.
             Add oxygenating plants during the first week and resist the urge to add fish too soon.</p>
        </main>
        """,
        title="Garden ponds",
    )


# ============================================================================
# Component Fixtures
# ============================================================================


@pytest.fixture
def extraction_config() -> ExtractionConfig:
    return ExtractionConfig()


@pytest.fixture
def extractor() -> ContentExtractor:
    """ContentExtractor with metrics switched off."""
    return ContentExtractor(metrics=MetricsRecorder(enabled=False))


@pytest.fixture
def soup() -> Callable[[str], BeautifulSoup]:
    """Parse HTML with the default tree builder."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse


@pytest.fixture
def html_file(tmp_path: Path, tokenized_article_html: str) -> Path:
    path = tmp_path / "article.html"
    path.write_text(tokenized_article_html, encoding="utf-8")
    return path


@pytest.fixture
def restore_logging():
    """Undo configure_logging() so later tests keep the default handlers."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
