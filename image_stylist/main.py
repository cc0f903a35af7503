"""Entry point — wires Config → ImageStylistService and prints one analysis."""
import asyncio
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from image_stylist.config import Config
from image_stylist.constants import (
    DEMO_IMAGE_URLS,
    DEMO_SECTIONS,
    DEMO_STYLE_PROFILE,
    MSG_DEMO_ANALYZING,
    MSG_DEMO_FAILED,
    MSG_DEMO_MATCH,
    MSG_DEMO_NO_MATCH,
    MSG_DEMO_NO_OUTFIT,
)
from image_stylist.errors import StylistError
from image_stylist.result import StyleAnalysisResult
from image_stylist.service import ImageStylistService


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def render(console: Console, result: StyleAnalysisResult) -> None:
    console.print(MSG_DEMO_MATCH if result.is_style_match else MSG_DEMO_NO_MATCH)
    for title, field in DEMO_SECTIONS:
        console.print(f"\n[bold]{title}:[/bold]")
        # Only outfit_suggestion can be None.
        value = getattr(result, field)
        console.print(MSG_DEMO_NO_OUTFIT if value is None else value, markup=False)


async def run(config: Config, image_urls: list[str], console: Console) -> int:
    service = ImageStylistService.from_config(config)
    console.print(MSG_DEMO_ANALYZING % len(image_urls))
    try:
        result = await service.get_style_analysis(
            image_urls,
            config.style_profile or DEMO_STYLE_PROFILE,
            config.language,
        )
    except StylistError as e:
        console.print(MSG_DEMO_FAILED % e, style="red", markup=False)
        return 1
    render(console, result)
    return 0


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)
    image_urls = sys.argv[1:] or list(DEMO_IMAGE_URLS)
    sys.exit(asyncio.run(run(config, image_urls, Console())))


if __name__ == "__main__":
    main()
