#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - EPUB assembly from ordered image records
# - Working directory is created per build and always removed afterwards
# - Two-pass packaging: stored mimetype first, then deflated content
# - Optional packaging through the external zip tool
#

"""
epub_generator.py - EPUB file generation
========================================

Builds an image-only EPUB 2 book from an ordered list of images. Each build
owns a uniquely named working directory holding the OCF layout
(mimetype, META-INF, OEBPS/images, OEBPS/text) which is zipped into the
final file and then removed.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
import time
import uuid
import zipfile
from pathlib import Path
from typing import Any

from .common_constants import EPUB_COPY_PROGRESS_EVERY, EPUB_PAGE_PROGRESS_EVERY
from .converter_errors import AssemblyError, ExternalToolError, MissingFileError
from .epub_builders import (
    build_container_xml,
    build_content_opf,
    build_hierarchical_nav_points,
    build_nav_points,
    build_page_xhtml,
    build_toc_ncx,
    page_title,
)
from .epub_constants import (
    ARCHIVER_BUILTIN,
    ARCHIVER_ZIP,
    DEFAULT_IMAGE_PADDING,
    DEFAULT_PAGE_LABEL,
    ENCODING,
    IMAGES_DIR,
    META_INF_DIR,
    MIMETYPE,
    MIMETYPE_FILE,
    NCX_FILE,
    OEBPS_DIR,
    OPF_FILE,
    TEXT_DIR,
    media_type_for,
    padded_name,
)
from .models import EpubManifestEntry, ImageRecord

logger = logging.getLogger(__name__)


def create_work_dir(temp_root: str | Path | None = None) -> Path:
    """Create a uniquely named working directory for one EPUB build."""
    if temp_root is not None:
        Path(temp_root).mkdir(parents=True, exist_ok=True)
    prefix = f"temp_epub_{int(time.time() * 1000)}_"
    return Path(tempfile.mkdtemp(prefix=prefix, dir=str(temp_root) if temp_root is not None else None))


def create_skeleton(work_dir: Path) -> None:
    """Write the mimetype and container files and create the OEBPS folders."""
    work_dir.mkdir(parents=True, exist_ok=True)
    (work_dir / MIMETYPE_FILE).write_text(MIMETYPE, ENCODING)
    (work_dir / META_INF_DIR).mkdir(exist_ok=True)
    (work_dir / META_INF_DIR / "container.xml").write_text(build_container_xml(), ENCODING)
    (work_dir / OEBPS_DIR / IMAGES_DIR).mkdir(parents=True, exist_ok=True)
    (work_dir / OEBPS_DIR / TEXT_DIR).mkdir(parents=True, exist_ok=True)


def copy_images(
    records: list[ImageRecord],
    work_dir: Path,
    padding: int = DEFAULT_IMAGE_PADDING,
    logger: logging.Logger | None = None,
) -> list[EpubManifestEntry]:
    """
    Copy every image into OEBPS/images under a sequential name.

    Args:
        records: Images in page order
        work_dir: Working directory holding the OEBPS folder
        padding: Zero padding of the sequence number
        logger: Logger instance

    Returns:
        One manifest entry per image, numbered from 1

    Raises:
        MissingFileError: If a source image no longer exists
    """
    if logger is None:
        logger = globals()["logger"]

    images_dir = work_dir / OEBPS_DIR / IMAGES_DIR
    entries: list[EpubManifestEntry] = []
    total = len(records)

    for number, record in enumerate(records, 1):
        if not record.path.exists():
            raise MissingFileError(f"File not found: {record.path}")

        extension = record.path.suffix.lower()
        filename = padded_name("image", number, extension, padding)
        shutil.copyfile(record.path, images_dir / filename)
        entries.append(
            EpubManifestEntry(
                id=f"img{number}",
                filename=filename,
                media_type=media_type_for(filename),
                page_number=number,
                source=record,
            )
        )

        if number % EPUB_COPY_PROGRESS_EVERY == 0 or number == total:
            logger.info(f"Copied {number}/{total} images")

    return entries


def write_pages(
    entries: list[EpubManifestEntry],
    work_dir: Path,
    hierarchical: bool = False,
    padding: int = DEFAULT_IMAGE_PADDING,
    page_label: str = DEFAULT_PAGE_LABEL,
    logger: logging.Logger | None = None,
) -> None:
    """Write one XHTML page per manifest entry and record its file name."""
    if logger is None:
        logger = globals()["logger"]

    text_dir = work_dir / OEBPS_DIR / TEXT_DIR
    total = len(entries)

    for entry in entries:
        entry.html_file = padded_name("page", entry.page_number, ".xhtml", padding)
        title = page_title(entry.source, entry.page_number, page_label)
        (text_dir / entry.html_file).write_text(build_page_xhtml(title, entry.filename, hierarchical), ENCODING)

        if entry.page_number % EPUB_PAGE_PROGRESS_EVERY == 0 or entry.page_number == total:
            logger.info(f"Created {entry.page_number}/{total} pages")


def _run_zip(args: list[str], work_dir: Path) -> None:
    try:
        subprocess.run(args, cwd=str(work_dir), capture_output=True, text=True, check=True)
    except FileNotFoundError as e:
        raise ExternalToolError("The 'zip' command was not found. Install zip or use the builtin archiver.") from e
    except subprocess.CalledProcessError as e:
        message = (e.stderr or e.stdout or "").strip()
        raise ExternalToolError(f"zip exited with status {e.returncode}: {message}", e.returncode) from e


def package_epub(work_dir: Path, output_path: Path, archiver: str = ARCHIVER_BUILTIN) -> Path:
    """
    Zip a working directory into an EPUB file.

    The archive is written in two passes: first the ``mimetype`` entry alone,
    stored without compression, then every other file, deflated, in sorted
    order. The archive is built next to ``output_path`` and moved over it
    only once complete, so a failed rebuild keeps the previous file.

    Args:
        work_dir: Directory holding mimetype, META-INF and OEBPS
        output_path: EPUB file to write
        archiver: ``builtin`` (zipfile) or ``zip`` (external tool)

    Returns:
        The absolute output path

    Raises:
        ExternalToolError: If the external zip tool is missing or fails
        AssemblyError: If the archive cannot be written
    """
    output_path = Path(output_path).resolve()
    if archiver not in (ARCHIVER_BUILTIN, ARCHIVER_ZIP):
        raise AssemblyError(f"Unknown archiver: {archiver}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_epub = output_path.with_suffix(".tmp.epub")
    if tmp_epub.exists():
        tmp_epub.unlink()

    try:
        if archiver == ARCHIVER_ZIP:
            _run_zip(["zip", "-0Xq", str(tmp_epub), MIMETYPE_FILE], work_dir)
            _run_zip(["zip", "-Xr9Dq", str(tmp_epub), ".", "-x", MIMETYPE_FILE], work_dir)
        else:
            _write_archive(work_dir, tmp_epub)
        os.replace(tmp_epub, output_path)
    except BaseException:
        # Drop the partial archive, the previous output is left as it was
        if tmp_epub.exists():
            tmp_epub.unlink()
        raise

    return output_path


def _write_archive(work_dir: Path, archive_path: Path) -> None:
    try:
        with zipfile.ZipFile(archive_path, "w") as z:
            z.writestr(MIMETYPE_FILE, MIMETYPE, zipfile.ZIP_STORED)
            files = []
            for root, _, names in os.walk(work_dir):
                for name in names:
                    fp = Path(root) / name
                    rel = fp.relative_to(work_dir).as_posix()
                    if rel == MIMETYPE_FILE:
                        continue
                    files.append((rel, fp))
            for rel, fp in sorted(files):
                z.write(fp, rel, zipfile.ZIP_DEFLATED)
    except (OSError, zipfile.BadZipFile) as e:
        raise AssemblyError(f"Error writing EPUB archive {archive_path}: {e}") from e


def create_epub(
    records: list[ImageRecord],
    output_path: Path,
    title: str,
    settings: dict[str, Any] | None = None,
    description: str | None = None,
    logger: logging.Logger | None = None,
) -> Path:
    """Create an EPUB file from ordered image records.

    Records carrying folder info produce a merged book: pages get a visible
    header and the navigation map groups pages under their source folder.

    Args:
        records: Images in page order
        output_path: EPUB file to write
        title: Book title
        settings: Options from the ``epub`` and ``workspace`` config sections
            (``language``, ``creator``, ``publisher``, ``rights``,
            ``page_label``, ``image_padding``, ``archiver``, ``temp_root``,
            ``keep_temp``)
        description: Optional book description
        logger: Logger instance

    Returns:
        The absolute output path

    Raises:
        MissingFileError: If a source image vanished before the copy
        AssemblyError: If any build or packaging step fails
    """
    if logger is None:
        logger = globals()["logger"]

    settings = settings or {}
    padding = int(settings.get("image_padding") or DEFAULT_IMAGE_PADDING)
    page_label = settings.get("page_label") or DEFAULT_PAGE_LABEL
    archiver = settings.get("archiver") or ARCHIVER_BUILTIN
    hierarchical = any(record.is_merged for record in records)
    uid = str(uuid.uuid4())

    try:
        work_dir = create_work_dir(settings.get("temp_root"))
    except OSError as e:
        raise AssemblyError(f"Error creating working directory: {e}") from e
    logger.debug(f"Working directory: {work_dir}")

    try:
        try:
            logger.info("1/6 Creating EPUB structure...")
            create_skeleton(work_dir)

            logger.info(f"2/6 Copying {len(records)} images...")
            entries = copy_images(records, work_dir, padding, logger)

            logger.info("3/6 Creating XHTML pages...")
            write_pages(entries, work_dir, hierarchical, padding, page_label, logger)

            logger.info("4/6 Creating content.opf...")
            opf = build_content_opf(title, entries, uid, settings, description)
            (work_dir / OEBPS_DIR / OPF_FILE).write_text(opf, ENCODING)

            logger.info("5/6 Creating toc.ncx...")
            if hierarchical:
                nav_points = build_hierarchical_nav_points(entries, page_label)
                ncx = build_toc_ncx(title, nav_points, uid, depth=2, page_count=len(entries))
            else:
                nav_points = build_nav_points(entries, page_label)
                ncx = build_toc_ncx(title, nav_points, uid)
            (work_dir / OEBPS_DIR / NCX_FILE).write_text(ncx, ENCODING)
        except OSError as e:
            raise AssemblyError(f"Error building EPUB contents: {e}") from e

        logger.info("6/6 Packaging EPUB...")
        result = package_epub(work_dir, output_path, archiver)
    finally:
        if settings.get("keep_temp"):
            logger.info(f"Keeping working directory: {work_dir}")
        else:
            try:
                shutil.rmtree(work_dir)
            except OSError as e:
                logger.warning(f"Could not remove working directory {work_dir}: {e}")

    logger.info(f"EPUB created: {result}")
    return result


def create_epub_from_images(
    image_paths: list[Path],
    output_path: Path,
    title: str,
    settings: dict[str, Any] | None = None,
    logger: logging.Logger | None = None,
) -> Path:
    """Create a single-folder EPUB from plain image paths."""
    records = [ImageRecord(path=Path(p)) for p in image_paths]
    return create_epub(records, output_path, title, settings, logger=logger)
