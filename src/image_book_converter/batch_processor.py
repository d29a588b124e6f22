#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Single-folder, batch and merge conversion modes
# - Per-entry error isolation in batch runs
# - File locking on the output directory during batch and merge runs
# - Merge statistics printed as a rich table
#

"""
batch_processor.py - Conversion orchestration
=============================================

Drives the three conversion modes shared by the PDF and EPUB commands:

- single folder: one folder, one named document, errors propagate;
- batch: one document per CSV entry, a failing entry is logged and skipped;
- merge: every CSV entry collected into one document, in CSV order.

All functions take the loaded configuration dictionary. Output folders are
resolved against ``output.base_dir`` (the current directory when unset).
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

import filelock
from rich.table import Table

from .common_constants import (
    BATCH_LOCK_NAME,
    DEFAULT_PAGE_HEIGHT,
    DEFAULT_PAGE_WIDTH,
    FORMAT_EPUB,
    FORMAT_EXTENSIONS,
    FORMAT_PDF,
)
from .common_print_utils import console, safe_print
from .converter_errors import ArgumentError, AssemblyError, NoImagesFoundError
from .epub_constants import MERGED_DESCRIPTION
from .epub_generator import create_epub
from .folder_scanner import collect_folder_images
from .models import BatchResult, CsvEntry, ImageRecord, MergeResult
from .pdf_generator import create_pdf


def _section(config: dict[str, Any] | None, name: str) -> dict[str, Any]:
    return (config or {}).get(name) or {}


def format_extension(fmt: str) -> str:
    """Return the file extension of an output format."""
    try:
        return FORMAT_EXTENSIONS[fmt]
    except KeyError:
        raise ArgumentError(f"Unsupported output format: {fmt}") from None


def build_output_filename(name: str, extension: str) -> str:
    """Append the extension to a name unless it already ends with it."""
    return name if name.endswith(extension) else f"{name}{extension}"


def document_title(name: str, extension: str) -> str:
    """Strip the format extension from an output name."""
    return name[: -len(extension)] if extension and name.endswith(extension) else name


def base_directory(config: dict[str, Any] | None) -> Path:
    """Return the directory all outputs are resolved against."""
    base_dir = _section(config, "output").get("base_dir")
    return Path(base_dir).expanduser().resolve() if base_dir else Path.cwd()


def output_directory(fmt: str, config: dict[str, Any] | None) -> Path:
    """Return the ``pdf/`` or ``epub/`` output folder for a format."""
    output = _section(config, "output")
    subdir = output.get("pdf_dir", "pdf") if fmt == FORMAT_PDF else output.get("epub_dir", "epub")
    return base_directory(config) / subdir


def resolve_output_path(name: str, extension: str, directory: Path) -> Path:
    """
    Build the absolute output path of a document, creating its folder.

    Args:
        name: Output name, with or without extension
        extension: Format extension, e.g. ``.pdf``
        directory: Folder the document goes in

    Returns:
        Absolute path of the document
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    return (directory / build_output_filename(name, extension)).resolve()


def page_size(config: dict[str, Any] | None) -> tuple[float, float]:
    """Return the configured PDF page size in points."""
    pdf = _section(config, "pdf")
    return (float(pdf.get("page_width") or DEFAULT_PAGE_WIDTH), float(pdf.get("page_height") or DEFAULT_PAGE_HEIGHT))


def epub_settings(config: dict[str, Any] | None) -> dict[str, Any]:
    """Flatten the ``epub`` and ``workspace`` sections for the EPUB generator."""
    settings = dict(_section(config, "epub"))
    settings.update(_section(config, "workspace"))
    return settings


def assemble(
    records: list[ImageRecord],
    output_path: Path,
    fmt: str,
    title: str,
    config: dict[str, Any] | None,
    description: str | None = None,
    logger: logging.Logger | None = None,
) -> Path:
    """Build one PDF or EPUB document from ordered image records."""
    if logger is None:
        logger = logging.getLogger(__name__)

    if fmt == FORMAT_PDF:
        return create_pdf([record.path for record in records], output_path, page_size(config), logger)
    if fmt == FORMAT_EPUB:
        return create_epub(records, output_path, title, epub_settings(config), description, logger)
    raise ArgumentError(f"Unsupported output format: {fmt}")


@contextmanager
def output_lock(directory: Path, config: dict[str, Any] | None) -> Iterator[None]:
    """Hold the lock guarding an output directory during batch and merge runs."""
    directory.mkdir(parents=True, exist_ok=True)
    timeout = _section(config, "batch").get("lock_timeout", -1)
    lock = filelock.FileLock(str(directory / BATCH_LOCK_NAME), timeout=-1 if timeout is None else timeout)
    try:
        lock.acquire()
    except filelock.Timeout as e:
        raise AssemblyError(f"Another run is writing into {directory}") from e
    try:
        yield
    finally:
        lock.release()


def process_single_folder(
    folder_path: str | Path,
    output_name: str,
    fmt: str,
    config: dict[str, Any] | None = None,
    logger: logging.Logger | None = None,
) -> Path:
    """
    Convert one folder into one named document.

    PDF output is resolved against the base directory, EPUB output goes in
    the EPUB output folder.

    Raises:
        FolderNotFoundError, NotADirectoryError, NoImagesFoundError,
        MissingFileError, AssemblyError: Propagated unchanged
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    extension = format_extension(fmt)
    logger.info(f"Folder: {folder_path}")
    image_paths = collect_folder_images(folder_path, require_images=True, logger=logger)

    directory = base_directory(config) if fmt == FORMAT_PDF else output_directory(fmt, config)
    output_path = resolve_output_path(output_name, extension, directory)
    logger.info(f"Output: {output_path}")

    records = [ImageRecord(path=p) for p in image_paths]
    return assemble(records, output_path, fmt, document_title(output_name, extension), config, logger=logger)


def run_batch(
    entries: list[CsvEntry],
    fmt: str,
    config: dict[str, Any] | None = None,
    logger: logging.Logger | None = None,
) -> BatchResult:
    """
    Convert every CSV entry into its own document.

    Each entry is processed independently: a folder without images is
    skipped with a warning, any other error is logged with the entry name
    and folder, and the loop moves on.

    Returns:
        The created documents and the failed entries
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    extension = format_extension(fmt)
    directory = output_directory(fmt, config)
    result = BatchResult()

    logger.info(f"Processing {len(entries)} CSV entr{'y' if len(entries) == 1 else 'ies'}...")
    with output_lock(directory, config):
        for position, entry in enumerate(entries, 1):
            logger.info(f"[{position}/{len(entries)}] {entry.name} <- {entry.folder_path}")
            try:
                image_paths = collect_folder_images(entry.folder_path, require_images=False, logger=logger)
                if not image_paths:
                    logger.warning(f"No images found in: {entry.folder_path}")
                    result.failed.append((entry.name, "no images found"))
                    continue

                output_path = resolve_output_path(entry.name, extension, directory)
                records = [ImageRecord(path=p) for p in image_paths]
                created = assemble(records, output_path, fmt, document_title(entry.name, extension), config, logger=logger)
                result.created.append(created)
                logger.info(f"Created: {created}")
            except Exception as e:
                logger.error(f"Error processing {entry.name} ({entry.folder_path}): {e}")
                result.failed.append((entry.name, str(e)))

    logger.info(f"Batch finished: {len(result.created)} created, {len(result.failed)} failed")
    return result


def collect_all_images(
    entries: list[CsvEntry],
    logger: logging.Logger | None = None,
) -> tuple[list[ImageRecord], list[str]]:
    """
    Collect the images of every CSV entry, in CSV order, for a merge run.

    Folders that fail validation are logged as errors and skipped, folders
    without images are logged as warnings and skipped.

    Returns:
        (records, names of the skipped entries)

    Raises:
        NoImagesFoundError: If no image at all was collected
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    records: list[ImageRecord] = []
    skipped: list[str] = []
    logger.info(f"Collecting images from {len(entries)} folder(s)...")

    for folder_index, entry in enumerate(entries, 1):
        logger.info(f"Folder {folder_index}/{len(entries)}: {entry.name}")
        try:
            image_paths = collect_folder_images(entry.folder_path, require_images=False, logger=logger)
        except Exception as e:
            logger.error(f"Error processing folder {entry.name}: {e}")
            skipped.append(entry.name)
            continue

        if not image_paths:
            logger.warning(f"No images found in: {entry.folder_path}")
            skipped.append(entry.name)
            continue

        total = len(image_paths)
        for image_index, path in enumerate(image_paths, 1):
            records.append(
                ImageRecord(
                    path=path,
                    folder_name=entry.name,
                    folder_index=folder_index,
                    image_index=image_index,
                    total_in_folder=total,
                )
            )
        logger.info(f"Added {total} image(s) from {entry.name}")

    logger.info(f"Total images collected: {len(records)}")
    if not records:
        raise NoImagesFoundError("No images found in any of the specified folders")
    return records, skipped


def count_images_per_folder(records: list[ImageRecord]) -> dict[str, int]:
    """Count images per folder name, in first-seen order."""
    counts: dict[str, int] = {}
    for record in records:
        name = record.folder_name or ""
        counts[name] = counts.get(name, 0) + 1
    return counts


def run_merge(
    entries: list[CsvEntry],
    output_name: str,
    fmt: str,
    config: dict[str, Any] | None = None,
    logger: logging.Logger | None = None,
) -> MergeResult:
    """
    Merge the images of every CSV entry into a single document.

    Returns:
        The merge outcome; statistics are printed before returning

    Raises:
        NoImagesFoundError: If no folder contributed any image
        AssemblyError: If the document cannot be produced
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    extension = format_extension(fmt)
    directory = output_directory(fmt, config)

    with output_lock(directory, config):
        records, skipped = collect_all_images(entries, logger)
        output_path = resolve_output_path(output_name, extension, directory)
        description = MERGED_DESCRIPTION if fmt == FORMAT_EPUB else None
        created = assemble(records, output_path, fmt, document_title(output_name, extension), config, description, logger)

    result = MergeResult(
        output_path=created,
        records=records,
        folder_counts=count_images_per_folder(records),
        skipped=skipped,
    )
    display_statistics(result, entries)
    return result


def display_statistics(result: MergeResult, entries: list[CsvEntry]) -> None:
    """Print the merge summary: folders, images, images per folder and output."""
    safe_print("\n[bold]Processing statistics:[/bold]")
    safe_print(f"  Folders processed: [cyan]{len(entries)}[/cyan]")
    safe_print(f"  Total images: [cyan]{result.total_images}[/cyan]")

    table = Table(title="Images per folder")
    table.add_column("Folder", style="cyan")
    table.add_column("Images", style="green", justify="right")
    for folder_name, count in result.folder_counts.items():
        table.add_row(folder_name, str(count))
    console.print(table)

    if result.skipped:
        safe_print(f"  [yellow]Skipped folders: {', '.join(result.skipped)}[/yellow]")
    safe_print(f"  Output file: [green]{result.output_path}[/green]")
