import logging
from typing import List, Optional, Sequence, Tuple, Union

from config.settings import EnvSettings, Settings
from handlers.renderer import TemplateRenderer
from providers.base import (
    BaseProvider,
    EmbedRequest,
    EmbedResult,
    MediaUrl,
    VideoMatch,
    get_start_time,
)
from providers.rutube import RuTubeProvider

logger = logging.getLogger(__name__)

EMBED_TEMPLATE = "embed.html"


class Embedder:
    def __init__(
        self,
        providers: Optional[List[BaseProvider]] = None,
        settings: Optional[Settings] = None,
        renderer: Optional[TemplateRenderer] = None,
    ):
        providers = providers if providers is not None else [RuTubeProvider()]
        # При совпадении нескольких провайдеров выигрывает больший rank
        self.providers: List[BaseProvider] = sorted(
            providers, key=lambda p: p.rank, reverse=True
        )
        self.settings = settings or EnvSettings()
        self.renderer = renderer or TemplateRenderer()
        logger.info(f"Initialized embedder with {len(self.providers)} providers")

    def get_provider(
        self, urls: Sequence[Union[str, MediaUrl]]
    ) -> Optional[Tuple[BaseProvider, VideoMatch]]:
        for provider in self.providers:
            found = provider.match(urls)
            if found:
                logger.info(
                    f"Found suitable provider: {provider.__class__.__name__}"
                )
                return provider, found

        logger.debug("No suitable provider found")
        return None

    def get_embed(
        self,
        urls: Sequence[Union[str, MediaUrl]],
        name: str = "",
        width: Optional[int] = None,
        height: Optional[int] = None,
        language: Optional[str] = None,
    ) -> Optional[EmbedResult]:
        matched = self.get_provider(urls)
        if not matched:
            return None

        provider, found = matched
        request = EmbedRequest(
            video_id=found.video_id,
            start_seconds=get_start_time(found.url),
            width=width,
            height=height,
            title=name,
            playlist_id=found.url.param("list"),
        )
        return provider.build_embed(request, self.settings, language)

    def embed(
        self,
        urls: Sequence[Union[str, MediaUrl]],
        name: str = "",
        width: Optional[int] = None,
        height: Optional[int] = None,
        language: Optional[str] = None,
    ) -> Optional[str]:
        result = self.get_embed(urls, name, width, height, language)
        if not result:
            return None
        return self.renderer.render(EMBED_TEMPLATE, result.as_context())

    def get_embeddable_markers(self) -> List[str]:
        markers: List[str] = []
        for provider in self.providers:
            for marker in provider.get_embeddable_markers():
                if marker not in markers:
                    markers.append(marker)
        return markers
