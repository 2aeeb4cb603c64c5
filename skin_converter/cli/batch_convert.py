from __future__ import annotations
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterator, List, Sequence

from dotenv import load_dotenv

from ..errors import SkinConverterError
from ..models.results import ReturnType
from ..pipeline.head_extractor import extract_head
from ..pipeline.skin_normalizer import normalize_skin
from ..repositories.skin_repository import SkinRepository
from ..services.head_service import HeadService

# Load environment variables first
load_dotenv()
CONVERTED_DIR = os.getenv("CONVERTED_DIR_PATH", "data/converted")

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def head_size(value: str) -> int:
    size = int(value)
    try:
        HeadService.check_size(size)
    except SkinConverterError as err:
        raise argparse.ArgumentTypeError(str(err)) from err
    return size


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="skin-convert",
        description="Normalize Minecraft skins to the square layout and render head avatars.",
    )
    ap.add_argument("inputs", nargs="+", help="skin files or folders of skins")
    ap.add_argument("--out", default=CONVERTED_DIR, help="output folder")
    ap.add_argument("--head", type=head_size, default=None, metavar="SIZE",
                    help="also write a SIZE x SIZE head avatar next to each skin")
    ap.add_argument("--recursive", action="store_true", help="descend into sub-folders")
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING ...")
    return ap


def iter_inputs(inputs: Sequence[str], repository: SkinRepository, recursive: bool) -> Iterator[Path]:
    for item in inputs:
        path = Path(item)
        if path.is_dir():
            yield from repository.iter_dir(path, recursive=recursive)
        else:
            yield path


def convert_file(path: Path, out_dir: Path, head_size: int | None, repository: SkinRepository) -> List[Path]:
    """Convert one skin; returns the written files."""
    skin = repository.load(path)
    normalized = normalize_skin(skin)

    variant = normalized.variant.value
    written = [repository.save(
        repository.encode(normalized.pixels, ReturnType.BUFFER_PNG),
        out_dir / f"{path.stem}_{variant}.png",
    )]

    if head_size is not None:
        head = extract_head(skin, head_size)
        written.append(repository.save(
            repository.encode(head, ReturnType.BUFFER_PNG),
            out_dir / f"{path.stem}_head{head_size}.png",
        ))
    return written


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    repository = SkinRepository()
    out_dir = Path(args.out)
    failures = 0
    converted = 0

    for path in iter_inputs(args.inputs, repository, args.recursive):
        try:
            for written in convert_file(path, out_dir, args.head, repository):
                logger.info(f"Wrote {written}")
            converted += 1
        except SkinConverterError as err:
            failures += 1
            logger.error(f"Skipping {path}: {err}")

    logger.info(f"Converted {converted} skins, {failures} failed")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
