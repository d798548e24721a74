"""SVG markup optimization."""

from __future__ import annotations

from pathlib import Path

from lxml import etree

from svgpng.application.results import OptimizedSvg
from svgpng.errors import OptimizationError

SVG_NS = "http://www.w3.org/2000/svg"

EDITOR_NAMESPACES = frozenset(
    {
        "http://www.inkscape.org/namespaces/inkscape",
        "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
        "http://ns.adobe.com/AdobeIllustrator/10.0/",
        "http://ns.adobe.com/Graphs/1.0/",
        "http://ns.adobe.com/AdobeSVGViewerExtensions/3.0/",
        "http://ns.adobe.com/Variables/1.0/",
        "http://ns.adobe.com/SaveForWeb/1.0/",
        "http://ns.adobe.com/Extensibility/1.0/",
        "http://ns.adobe.com/Flows/1.0/",
        "http://ns.adobe.com/ImageReplacement/1.0/",
        "http://ns.adobe.com/GenericCustomNamespace/1.0/",
        "http://ns.adobe.com/XPath/1.0/",
        "http://www.bohemiancoding.com/sketch/ns",
        "http://creativecommons.org/ns#",
        "http://purl.org/dc/elements/1.1/",
        "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    }
)


def _namespace(name: str) -> str | None:
    return etree.QName(name).namespace if name.startswith("{") else None


class LxmlSvgOptimizer:
    """Strip markup that does not affect rendering.

    Removes the XML declaration, doctype, comments, processing instructions,
    ``<metadata>`` blocks, editor-specific elements and attributes, and
    ignorable whitespace. External entities are never resolved.
    """

    def optimize(self, svg_data: bytes, *, path: Path | None = None) -> OptimizedSvg:
        """Optimize SVG markup for embedding into an HTML document."""
        parser = etree.XMLParser(
            remove_comments=True,
            remove_pis=True,
            remove_blank_text=True,
            resolve_entities=False,
            no_network=True,
        )
        try:
            root = etree.fromstring(svg_data, parser)
        except etree.XMLSyntaxError as exc:
            source = path if path is not None else "<string>"
            raise OptimizationError(f"Unable to optimize SVG {source}: {exc}") from exc

        doomed = [
            element
            for element in root.iter()
            if isinstance(element.tag, str)
            and (
                element.tag == f"{{{SVG_NS}}}metadata"
                or _namespace(element.tag) in EDITOR_NAMESPACES
            )
        ]
        for element in doomed:
            parent = element.getparent()
            if parent is not None:
                parent.remove(element)

        for element in root.iter():
            if not isinstance(element.tag, str):
                continue
            for name in list(element.attrib):
                if _namespace(name) in EDITOR_NAMESPACES:
                    del element.attrib[name]

        etree.cleanup_namespaces(root)
        return OptimizedSvg(data=etree.tostring(root, encoding="unicode"))
