"""Pytest configuration and fixtures for extractor tests."""

from pathlib import Path

import pytest

from mentions_hashtags.core import config as config_module
from mentions_hashtags.core.config import ENV_PREFIX, ExtractorConfig
from mentions_hashtags.core.models import MentionsHashtags
from mentions_hashtags.extractor import TokenExtractor, reset_default_extractor


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Isolate tests from user env vars, .env files and cached globals."""
    for name in ("STRIP_TRAILING_PERIODS", "EXTRA_ALLOWED_CHARS", "OUTPUT_FORMAT"):
        monkeypatch.delenv(f"{ENV_PREFIX}{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "_config", None)
    reset_default_extractor()
    yield
    reset_default_extractor()


@pytest.fixture
def extractor() -> TokenExtractor:
    """Extractor with default settings."""
    return TokenExtractor()


@pytest.fixture
def greedy_extractor() -> TokenExtractor:
    """Extractor that keeps trailing periods."""
    return TokenExtractor(ExtractorConfig(strip_trailing_periods=False))


@pytest.fixture
def tiktok_caption() -> str:
    """Sample TikTok caption."""
    return "@charlidamelio @GucciOfficial just posted! #fyp #CapCut #Chanel"


@pytest.fixture
def youtube_comments() -> list[str]:
    """Sample YouTube comment thread."""
    return [
        "@MrBeast this is insane #Shorts",
        "@PewDiePie @MrBeast collab when?? #YouTubeShorts",
        "#Shorts #Music #music",
    ]


@pytest.fixture
def sample_result() -> MentionsHashtags:
    """Sample extraction result."""
    return MentionsHashtags(
        mentions=["@charlidamelio", "@Khaby.Lame"],
        hashtags=["#fyp", "#CapCut"],
    )
