"""Command-line driver: resolve llms.txt for many packages and write them out."""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from get_llms import __version__
from get_llms.config import Settings, settings
from get_llms.deps import get_dependencies, load_package_json, parse_deps
from get_llms.filenames import SanitizerOptions, generate_filename
from get_llms.http_client import build_client
from get_llms.models import FallbackStrategy, FetchResult
from get_llms.registry import MetadataUnavailable, NpmMetadataProvider
from get_llms.reporter import LoguruReporter
from get_llms.resolver import ResolutionEngine


@dataclass(frozen=True)
class RunOptions:
    output: Path
    filename: str
    extension: str
    fallback: FallbackStrategy
    dry_run: bool = False
    concurrency: int = 4
    sanitizer: SanitizerOptions = field(default_factory=SanitizerOptions)


@dataclass
class Summary:
    total: int = 0
    success: int = 0
    failed: int = 0
    fallback: int = 0

    def record(self, result: FetchResult | None) -> None:
        if result is None:
            self.failed += 1
            return
        self.success += 1
        if result.is_fallback:
            self.fallback += 1


def _configure_logging(verbosity: str, level: str = "INFO") -> None:
    """Route console output by verbosity.

    quiet: errors only, on stderr.  normal: ``level`` and up.  verbose: DEBUG.
    """
    logger.remove()
    if verbosity != "quiet":
        if verbosity == "verbose":
            level = "DEBUG"
        logger.add(
            sys.stdout,
            level=level,
            format="{message}",
            filter=lambda record: record["level"].no < 40,
        )
    logger.add(sys.stderr, level="ERROR", format="{message}")


def build_parser(config: Settings | None = None) -> argparse.ArgumentParser:
    config = config or settings
    parser = argparse.ArgumentParser(
        prog="get-llms",
        description="Download llms.txt documentation files for npm packages.",
    )
    parser.add_argument(
        "packages",
        nargs="*",
        help="Package names; when omitted, dependencies of --package are used",
    )
    parser.add_argument(
        "--package",
        dest="package_path",
        default=config.package_path,
        help="Path to package.json (default: %(default)s)",
    )
    parser.add_argument(
        "--deps",
        default=config.deps,
        help="Dependency groups: prod,dev,peer,optional,all (default: %(default)s)",
    )
    parser.add_argument("--output", default=config.output, help="Output directory")
    parser.add_argument(
        "--filename",
        default=config.filename,
        help="Filename pattern, {name} is the package name (default: %(default)s)",
    )
    parser.add_argument("--extension", default=config.extension)
    parser.add_argument(
        "--fallback",
        default=config.fallback,
        help="none | readme | empty | skip (default: %(default)s)",
    )
    parser.add_argument("--concurrency", type=int, default=config.concurrency)
    parser.add_argument("--dry-run", action="store_true")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", "-q", action="store_true")
    verbosity.add_argument("--verbose", "-v", action="store_true")

    parser.add_argument("--space-replacement", default=config.space_replacement)
    parser.add_argument("--slash-replacement", default=config.slash_replacement)
    parser.add_argument("--at-replacement", default=config.at_replacement)
    parser.add_argument("--version", action="version", version=__version__)
    return parser


async def _process_package(
    engine: ResolutionEngine, name: str, options: RunOptions
) -> FetchResult | None:
    try:
        result = await engine.resolve(name, options.fallback)
    except MetadataUnavailable as e:
        logger.error(f"❌ {name}: {e}")
        return None

    if result is None:
        logger.info(f"❌ {name}: No llms.txt found")
        return None

    path = options.output / generate_filename(
        options.filename, name, options.extension, options.sanitizer
    )
    if options.dry_run:
        logger.info(f"[DRY RUN] Would write {name} to {path}")
    else:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(result.content, encoding="utf-8")
        except OSError as e:
            logger.error(f"❌ {name}: could not write {path}: {e}")
            return None

    if result.is_fallback:
        logger.info(
            f"✅ {name}: Using {result.fallback_type} fallback ({result.location})"
        )
    else:
        logger.info(f"✅ {name}: Found llms.txt at {result.location}")
    return result


async def run(
    packages: list[str], options: RunOptions, config: Settings | None = None
) -> Summary:
    """Resolve every package, at most ``options.concurrency`` at a time."""
    config = config or settings
    summary = Summary(total=len(packages))
    semaphore = asyncio.Semaphore(max(1, options.concurrency))

    async with build_client(config) as client:
        engine = ResolutionEngine(
            client,
            NpmMetadataProvider(client, config.registry_url),
            LoguruReporter(component="resolver"),
            github_raw_url=config.github_raw_url,
        )

        async def _one(name: str) -> None:
            async with semaphore:
                summary.record(await _process_package(engine, name, options))

        await asyncio.gather(*(_one(name) for name in packages))

    return summary


def _log_summary(summary: Summary) -> None:
    logger.info("\n--- Summary ---")
    logger.info(f"Total packages: {summary.total}")
    success = f"Success: {summary.success}"
    if summary.fallback:
        success += f" (including {summary.fallback} fallback)"
    logger.info(success)
    logger.info(f"Failed: {summary.failed}")


def main(argv: list[str] | None = None, config: Settings | None = None) -> int:
    config = config or settings
    args = build_parser(config).parse_args(argv)

    verbosity = "quiet" if args.quiet else "verbose" if args.verbose else "normal"
    _configure_logging(verbosity, config.log_level.upper())

    options = RunOptions(
        output=Path(args.output),
        filename=args.filename,
        extension=args.extension,
        fallback=FallbackStrategy.coerce(args.fallback),
        dry_run=args.dry_run,
        concurrency=args.concurrency,
        sanitizer=SanitizerOptions(
            space_replacement=args.space_replacement,
            slash_replacement=args.slash_replacement,
            at_replacement=args.at_replacement,
        ),
    )
    logger.debug(f"Running with options: {options}")
    logger.debug(f"Output directory: {options.output.resolve()}")

    if args.packages:
        packages = list(dict.fromkeys(args.packages))
    else:
        try:
            package_json = load_package_json(args.package_path)
        except (OSError, ValueError) as e:
            logger.error(f"Could not read {args.package_path}: {e}")
            return 1
        dep_types = parse_deps(args.deps, LoguruReporter(component="cli"))
        packages = list(get_dependencies(package_json, dep_types))

    if not packages:
        logger.info("No dependencies found")
        return 0

    count = len(packages)
    logger.info(f"Processing {count} package{'s' if count != 1 else ''}...")
    if options.fallback is not FallbackStrategy.NONE:
        logger.info(f"Using fallback: {options.fallback}")

    summary = asyncio.run(run(packages, options, config))
    _log_summary(summary)
    return 0
