"""3MF export of a terrain surface as a single coloured object (XML + ZIP)."""

import zipfile

from ..core.models import TerrainBuffers


def _rgb_to_hex(rgb: tuple[float, float, float]) -> str:
    r, g, b = (max(0, min(255, round(c * 255))) for c in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace('"', "&quot;")


def export_3mf(
    buffers: TerrainBuffers,
    output_path: str,
    color: tuple[float, float, float],
    name: str = "Terrain",
) -> dict:
    """Export the terrain triangles as a 3MF file.

    The 3MF file is a ZIP archive containing:
    - [Content_Types].xml
    - _rels/.rels
    - 3D/3dmodel.model (the model XML)
    """
    positions = buffers.positions.reshape(-1, 3)
    triangles = buffers.triangle_indices.reshape(-1, 3)
    if len(positions) == 0 or len(triangles) == 0:
        raise ValueError("No mesh data to export")

    model_xml = _build_model_xml(name, positions, triangles, _rgb_to_hex(color))

    with zipfile.ZipFile(output_path, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("[Content_Types].xml", _CONTENT_TYPES)
        zf.writestr("_rels/.rels", _RELS)
        zf.writestr("3D/3dmodel.model", model_xml)

    return {"success": True, "filepath": output_path, "objects": 1}


def _build_model_xml(name: str, positions, triangles, hex_color: str) -> str:
    safe_name = _escape(name)
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<model unit="millimeter" xml:lang="en-US"',
        '  xmlns="http://schemas.microsoft.com/3dmanufacturing/core/2015/02"',
        '  xmlns:m="http://schemas.microsoft.com/3dmanufacturing/material/2015/02">',
        '  <metadata name="Application">fault-terrain</metadata>',
        "  <resources>",
        '    <m:basematerials id="1">',
        f'      <m:base name="{safe_name}" displaycolor="{hex_color}"/>',
        "    </m:basematerials>",
        f'    <object id="2" name="{safe_name}" pid="1" pindex="0" type="model">',
        "      <mesh>",
        "        <vertices>",
    ]
    for v in positions:
        parts.append(f'          <vertex x="{v[0]:.6f}" y="{v[1]:.6f}" z="{v[2]:.6f}"/>')
    parts.append("        </vertices>")

    parts.append("        <triangles>")
    for t in triangles:
        parts.append(f'          <triangle v1="{t[0]}" v2="{t[1]}" v3="{t[2]}"/>')
    parts.append("        </triangles>")

    parts.extend([
        "      </mesh>",
        "    </object>",
        "  </resources>",
        "  <build>",
        '    <item objectid="2"/>',
        "  </build>",
        "</model>",
    ])
    return "\n".join(parts)


_CONTENT_TYPES = """<?xml version="1.0" encoding="UTF-8"?>
<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">
  <Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>
  <Default Extension="model" ContentType="application/vnd.ms-package.3dmanufacturing-3dmodel+xml"/>
</Types>"""

_RELS = """<?xml version="1.0" encoding="UTF-8"?>
<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
  <Relationship Target="/3D/3dmodel.model" Id="rel0" Type="http://schemas.microsoft.com/3dmanufacturing/2013/01/3dmodel"/>
</Relationships>"""
