#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - XHTML/XML builders for image-only EPUB 2 books
# - Page XHTML and container.xml generated with ElementTree
# - OPF and NCX templates with explicit escaping
# - Added two-level (folder -> page) navigation for merged books
#

"""
epub_builders.py - EPUB component builders
==========================================

Provides functions to build the EPUB components of an image book: one XHTML
page per image, the OPF package file, the NCX navigation map and the OCF
container file. Uses ElementTree for XHTML and container generation so
titles and paths are escaped correctly.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from datetime import date
from io import StringIO
from typing import Any
import xml.etree.ElementTree as ET

from .epub_constants import (
    CONTAINER_NS,
    DEFAULT_CREATOR,
    DEFAULT_LANGUAGE,
    DEFAULT_PAGE_LABEL,
    DEFAULT_PUBLISHER,
    DEFAULT_RIGHTS,
    IMAGES_DIR,
    NCX_FILE,
    NCX_MEDIA_TYPE,
    OEBPS_DIR,
    OPF_FILE,
    OPF_MEDIA_TYPE,
    TEXT_DIR,
    XHTML_MEDIA_TYPE,
    XHTML_NS,
)
from .models import EpubManifestEntry, ImageRecord

PAGE_CSS = "body{margin:0;padding:0;text-align:center}img{max-width:100%;max-height:100vh}"
MERGED_PAGE_CSS = (
    "body{margin:0;padding:0;text-align:center}"
    ".page-container{width:100%;height:100vh;display:flex;flex-direction:column;justify-content:center;align-items:center}"
    ".page-header{font-family:Arial,sans-serif;font-size:12px;color:#666;margin-bottom:10px;padding:5px}"
    "img{max-width:100%;max-height:90vh;object-fit:contain}"
)


def page_title(record: ImageRecord | None, page_number: int, page_label: str = DEFAULT_PAGE_LABEL) -> str:
    """
    Build the title of one image page.

    Single-folder books use ``"Page N"``; merged books use the source folder
    name and the position of the image inside that folder.
    """
    if record is not None and record.is_merged:
        return f"{record.folder_name} - {page_label} {record.image_index}"
    return f"{page_label} {page_number}"


def build_page_xhtml(title: str, image_filename: str, hierarchical: bool = False) -> str:
    """
    Build the XHTML page that shows one image.

    Args:
        title: Page title, also used as image alt text
        image_filename: Image file name inside OEBPS/images
        hierarchical: Add a visible page header (merged books)

    Returns:
        Complete XHTML document as string
    """
    ET.register_namespace("", XHTML_NS)

    html_elem = ET.Element(f"{{{XHTML_NS}}}html")

    head = ET.SubElement(html_elem, f"{{{XHTML_NS}}}head")
    title_elem = ET.SubElement(head, f"{{{XHTML_NS}}}title")
    title_elem.text = title
    style = ET.SubElement(head, f"{{{XHTML_NS}}}style")
    style.set("type", "text/css")
    style.text = MERGED_PAGE_CSS if hierarchical else PAGE_CSS

    body = ET.SubElement(html_elem, f"{{{XHTML_NS}}}body")
    container = ET.SubElement(body, f"{{{XHTML_NS}}}div")
    if hierarchical:
        container.set("class", "page-container")
        header = ET.SubElement(container, f"{{{XHTML_NS}}}div")
        header.set("class", "page-header")
        header.text = title

    img = ET.SubElement(container, f"{{{XHTML_NS}}}img")
    img.set("src", f"../{IMAGES_DIR}/{image_filename}")
    img.set("alt", title)

    tree = ET.ElementTree(html_elem)
    output = StringIO()
    tree.write(output, encoding="unicode", method="xml")

    result = '<?xml version="1.0" encoding="utf-8"?>\n'
    result += '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" "http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">\n'
    result += output.getvalue()

    return result


def build_container_xml() -> str:
    """
    Build container.xml using ElementTree.

    Creates the EPUB container XML that points to the OPF file.

    Returns:
        Container XML as string
    """
    ET.register_namespace("", CONTAINER_NS)

    container = ET.Element(f"{{{CONTAINER_NS}}}container", version="1.0")

    rootfiles = ET.SubElement(container, f"{{{CONTAINER_NS}}}rootfiles")
    rootfile = ET.SubElement(rootfiles, f"{{{CONTAINER_NS}}}rootfile")
    rootfile.set("full-path", f"{OEBPS_DIR}/{OPF_FILE}")
    rootfile.set("media-type", OPF_MEDIA_TYPE)

    return ET.tostring(container, encoding="unicode", method="xml", xml_declaration=True)


def build_content_opf(
    title: str,
    entries: list[EpubManifestEntry],
    uid: str,
    metadata: dict[str, Any] | None = None,
    description: str | None = None,
) -> str:
    """Build the OPF 2.0 package document.

    The manifest lists the NCX, then one image item and one page item per
    entry. The spine lists the page items in entry order.

    Args:
        title: Book title
        entries: Manifest entries in page order
        uid: Unique identifier UUID
        metadata: Optional ``language``, ``creator``, ``publisher`` and
            ``rights`` overrides
        description: Optional book description (merged books)

    Returns:
        Complete OPF XML as string
    """
    metadata = metadata or {}
    language = metadata.get("language") or DEFAULT_LANGUAGE
    creator = metadata.get("creator") or DEFAULT_CREATOR
    publisher = metadata.get("publisher") or DEFAULT_PUBLISHER
    rights = metadata.get("rights") or DEFAULT_RIGHTS
    created = date.today().isoformat()

    manifest = [f'    <item id="ncx" href="{NCX_FILE}" media-type="{NCX_MEDIA_TYPE}"/>']
    spine = []
    for entry in entries:
        manifest.append(f'    <item id="{entry.id}" href="{IMAGES_DIR}/{html.escape(entry.filename)}" media-type="{entry.media_type}"/>')
        manifest.append(f'    <item id="page{entry.page_number}" href="{TEXT_DIR}/{html.escape(entry.html_file)}" media-type="{XHTML_MEDIA_TYPE}"/>')
        spine.append(f'    <itemref idref="page{entry.page_number}"/>')

    extra_meta = ""
    if description:
        extra_meta = f"\n    <dc:description>{html.escape(description)}</dc:description>"
    cover_meta = '\n    <meta name="cover" content="img1"/>' if entries else ""

    manifest_xml = "\n".join(manifest)
    spine_xml = "\n".join(spine)

    return f"""<?xml version="1.0" encoding="utf-8"?>
<package xmlns="http://www.idpf.org/2007/opf" unique-identifier="BookId" version="2.0">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:opf="http://www.idpf.org/2007/opf">
    <dc:identifier id="BookId" opf:scheme="UUID">{uid}</dc:identifier>
    <dc:title>{html.escape(title)}</dc:title>
    <dc:language>{html.escape(language)}</dc:language>
    <dc:creator opf:file-as="{html.escape(creator)}" opf:role="aut">{html.escape(creator)}</dc:creator>
    <dc:date opf:event="creation">{created}</dc:date>
    <dc:publisher>{html.escape(publisher)}</dc:publisher>
    <dc:rights>{html.escape(rights)}</dc:rights>{extra_meta}{cover_meta}
  </metadata>
  <manifest>
{manifest_xml}
  </manifest>
  <spine toc="ncx">
{spine_xml}
  </spine>
</package>"""


@dataclass
class NavPoint:
    """One navPoint of the NCX navigation map, possibly with children"""

    nav_id: str
    label: str
    src: str
    play_order: int
    children: list[NavPoint] = field(default_factory=list)

    def to_ncx_navpoint(self, depth: int = 0) -> str:
        """Convert to NCX navPoint XML"""
        indent = "  " * depth
        result = f'{indent}<navPoint id="{self.nav_id}" playOrder="{self.play_order}">\n'
        result += f"{indent}  <navLabel><text>{html.escape(self.label)}</text></navLabel>\n"
        result += f'{indent}  <content src="{html.escape(self.src)}"/>\n'

        for child in self.children:
            result += child.to_ncx_navpoint(depth + 1)

        result += f"{indent}</navPoint>\n"
        return result


def build_nav_points(entries: list[EpubManifestEntry], page_label: str = DEFAULT_PAGE_LABEL) -> list[NavPoint]:
    """Build one flat navPoint per page, playOrder equal to the page number."""
    return [
        NavPoint(
            nav_id=f"navpoint-{entry.page_number}",
            label=f"{page_label} {entry.page_number}",
            src=f"{TEXT_DIR}/{entry.html_file}",
            play_order=entry.page_number,
        )
        for entry in entries
    ]


def build_hierarchical_nav_points(entries: list[EpubManifestEntry], page_label: str = DEFAULT_PAGE_LABEL) -> list[NavPoint]:
    """
    Build a two-level navigation map: one navPoint per source folder holding
    one navPoint per page of that folder.

    A single playOrder counter runs over the whole map, incremented once for
    every folder and once for every page, in document order. Pages are
    grouped by runs of equal ``folder_index``; entries without folder info
    each get a group of their own.
    """
    nav_points: list[NavPoint] = []
    current: NavPoint | None = None
    current_index: int | None = None
    play_order = 0

    for entry in entries:
        record = entry.source
        folder_index = record.folder_index if record is not None and record.is_merged else None

        if current is None or folder_index is None or folder_index != current_index:
            play_order += 1
            label = record.folder_name if folder_index is not None else page_title(record, entry.page_number, page_label)
            current = NavPoint(
                nav_id=f"folder-{len(nav_points) + 1}",
                label=label or "",
                src=f"{TEXT_DIR}/{entry.html_file}",
                play_order=play_order,
            )
            current_index = folder_index
            nav_points.append(current)

        play_order += 1
        # Nested under its folder, so the label omits the folder name
        child_label = f"{page_label} {record.image_index}" if folder_index is not None else page_title(record, entry.page_number, page_label)
        current.children.append(
            NavPoint(
                nav_id=f"page-{entry.page_number}",
                label=child_label,
                src=f"{TEXT_DIR}/{entry.html_file}",
                play_order=play_order,
            )
        )

    return nav_points


def build_toc_ncx(
    title: str,
    nav_points: list[NavPoint],
    uid: str,
    depth: int = 1,
    page_count: int = 0,
) -> str:
    """Build the NCX navigation document.

    Args:
        title: Book title
        nav_points: Top-level navPoints
        uid: Same identifier as the OPF
        depth: Navigation depth (1 flat, 2 folder -> page)
        page_count: Value of totalPageCount and maxPageNumber

    Returns:
        NCX XML as string
    """
    nav_map_content = ""
    for point in nav_points:
        nav_map_content += point.to_ncx_navpoint(2)

    return f"""<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE ncx PUBLIC "-//NISO//DTD ncx 2005-1//EN" "http://www.daisy.org/z3986/2005/ncx-2005-1.dtd">
<ncx xmlns="http://www.daisy.org/z3986/2005/ncx/" version="2005-1">
  <head>
    <meta name="dtb:uid" content="{uid}"/>
    <meta name="dtb:depth" content="{depth}"/>
    <meta name="dtb:totalPageCount" content="{page_count}"/>
    <meta name="dtb:maxPageNumber" content="{page_count}"/>
  </head>
  <docTitle>
    <text>{html.escape(title)}</text>
  </docTitle>
  <navMap>
{nav_map_content}  </navMap>
</ncx>"""
