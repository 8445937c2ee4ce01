import re
from urllib.parse import urlencode

from providers.base import BaseProvider, EmbedRequest

_PLAYLIST_ID = re.compile(r"^[A-Za-z0-9\-_]+$")


class RuTubeProvider(BaseProvider):
    platform = "rutube"
    rank = 1201
    markers = ["rutube.ru"]
    PATTERNS = [
        r"^https?://((www|m)\.)?rutube\.ru/video/(private/)?(?P<id>[^/?#]+)(?:/|[?#]|$)",
    ]

    EMBED_URL = "https://rutube.ru/play/embed/{id}"
    NOCOOKIE_EMBED_URL = "https://www.rutube-nocookie.com/embed/{id}"

    def _build_embed_url(self, request: EmbedRequest, nocookie: bool) -> str:
        params = {}
        if request.start_seconds > 0:
            params["t"] = request.start_seconds

        # Видео из плейлиста продолжает играть внутри него
        if request.playlist_id and _PLAYLIST_ID.match(request.playlist_id):
            params["list"] = request.playlist_id

        template = self.NOCOOKIE_EMBED_URL if nocookie else self.EMBED_URL
        url = template.format(id=request.video_id)
        if params:
            url = f"{url}?{urlencode(params)}"
        return url
