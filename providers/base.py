import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple, Union
from urllib.parse import parse_qs, urlsplit

from markupsafe import Markup, escape

from config.settings import Settings
from localization.utils import t

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 300

# 4300 — лимит цифр для int() по умолчанию, длиннее уходит в ветку float
_INTEGER = re.compile(r"^\s*[+-]?\d{1,4300}\s*$")
_NUMERIC = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")
# Не больше 9 цифр в каждой части, иначе строка не разбирается
_DURATION = re.compile(r"(\d{1,9}h)?(\d{1,9}m)?(\d{1,9}s)?", flags=re.IGNORECASE)
_UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}
_ENCODED_REF = re.compile(r"&amp;#(\d+|x[0-9a-f]+);", flags=re.IGNORECASE)


@dataclass(frozen=True)
class MediaUrl:
    url: str

    def param(self, name: str) -> Optional[str]:
        values = parse_qs(urlsplit(self.url).query, keep_blank_values=True).get(name)
        return values[0] if values else None

    def __str__(self) -> str:
        return self.url


class VideoMatch(NamedTuple):
    video_id: str
    url: MediaUrl


# None — провайдер не может встроить этот набор ссылок
MatchResult = Optional[VideoMatch]


@dataclass(frozen=True)
class EmbedRequest:
    video_id: str
    start_seconds: int = 0
    width: Optional[int] = None
    height: Optional[int] = None
    title: str = ""
    playlist_id: Optional[str] = None


@dataclass(frozen=True)
class EmbedResult:
    embed_url: str
    width: int
    height: int
    title: str

    def as_context(self) -> Dict[str, Union[str, int]]:
        return {
            "width": self.width,
            "height": self.height,
            "embedurl": self.embed_url,
            "title": self.title,
        }


def as_media_url(url: Union[str, MediaUrl]) -> MediaUrl:
    return url if isinstance(url, MediaUrl) else MediaUrl(str(url))


def parse_start_seconds(raw: Optional[str]) -> int:
    """
    Переводит отметку начала в целое число секунд.

    Принимает число ("90", "12.7") или составную длительность вида
    "1h2m3s", "2m" или "45S". Всё остальное даёт 0.
    """
    if not raw:
        return 0

    if _INTEGER.match(raw):
        try:
            return max(int(raw), 0)
        except ValueError:
            # Лимит цифр мог быть понижен через sys.set_int_max_str_digits
            return 0

    if _NUMERIC.match(raw):
        try:
            return max(int(float(raw)), 0)
        except OverflowError:
            return 0

    seconds = 0
    m = _DURATION.match(raw.strip())
    for part in m.groups():
        if not part:
            continue
        seconds += int(part[:-1]) * _UNIT_SECONDS[part[-1].lower()]
    return seconds


def get_start_time(url: MediaUrl) -> int:
    raw = url.param("t")
    # t=0 считается пустым, как и отсутствующий параметр
    if not raw or raw == "0":
        raw = url.param("start")
    return parse_start_seconds(raw)


def pick_video_size(
    width: Optional[int], height: Optional[int]
) -> Tuple[int, int]:
    if not width:
        return DEFAULT_WIDTH, DEFAULT_HEIGHT
    if not height:
        return int(width), round(int(width) * DEFAULT_HEIGHT / DEFAULT_WIDTH)
    return int(width), int(height)


def escape_title(text: str) -> Markup:
    # Уже закодированные числовые ссылки (&#233;) оставляем как есть
    return Markup(_ENCODED_REF.sub(r"&#\1;", str(escape(text))))


class BaseProvider(ABC):
    PATTERNS: List[str] = []
    platform: str = ""
    rank: int = 0
    markers: List[str] = []

    def match(self, urls: Sequence[Union[str, MediaUrl]]) -> MatchResult:
        # Поддерживается только одна ссылка, запасных вариантов нет
        if len(urls) != 1:
            return None

        url = as_media_url(urls[0])
        video_id = self.extract_id(str(url))
        if video_id is None:
            logger.debug(f"{self.platform}: no match for {url}")
            return None
        return VideoMatch(video_id, url)

    def extract_id(self, url: str) -> Optional[str]:
        for pattern in self.PATTERNS:
            m = re.match(pattern, url, flags=re.IGNORECASE)
            if m:
                return m.group("id")
        return None

    def list_supported_urls(
        self, urls: Sequence[Union[str, MediaUrl]]
    ) -> List[MediaUrl]:
        found = self.match(urls)
        return [found.url] if found else []

    def is_valid_url(self, url: str) -> bool:
        return self.match([url]) is not None

    def get_embeddable_markers(self) -> List[str]:
        return list(self.markers)

    def resolve_title(
        self, name: Optional[str], language: Optional[str] = None
    ) -> str:
        info = (name or "").strip()
        if not info or info.startswith("http"):
            info = t("pluginname", language=language)
        return escape_title(info)

    @abstractmethod
    def _build_embed_url(self, request: EmbedRequest, nocookie: bool) -> str: ...

    def build_embed(
        self,
        request: EmbedRequest,
        settings: Settings,
        language: Optional[str] = None,
    ) -> EmbedResult:
        nocookie = settings.get_bool("nocookie")
        width, height = pick_video_size(request.width, request.height)
        embed_url = self._build_embed_url(request, nocookie)
        logger.info(
            f"Built {self.platform} embed for {request.video_id}: {embed_url} ({width}x{height})"
        )
        return EmbedResult(
            embed_url=embed_url,
            width=width,
            height=height,
            title=self.resolve_title(request.title, language),
        )
