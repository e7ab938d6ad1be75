from . import utils

UNSET = "-"

IMAGE_INFO_FIELDS = (
    ("Camera model", "model"),
    ("Lens model", "lens-model"),
    ("Owner name", "owner-name"),
    ("Shot's date", "date-time"),
    ("Image width", "image-width"),
    ("Image height", "image-height"),
    ("Color space", "color-space"),
    ("Compression", "compression"),
    ("Exposure time", "exposure-time"),
    ("F number", "f-number"),
    ("Focal length", "focal-length"),
)


def _block(name, lines):
    return "\n".join([f"[{name}]"] +
                     [f"\t{line}" for line in lines] +
                     [f"[/{name}]"])


def format_header(header):
    return _block("Header", [
        f"BYTE ORDER: {header['byte-order'].capitalize()} Endian",
        f"TIFF MAGIC WORD: {utils.hexify(header['tiff-magic'])}",
        f"TIFF OFFSET: {utils.hexify(header['tiff-offset'], 8)}",
        f"CR2 MAGIC WORD: {header['cr2-magic']} - {header['marker']}",
        f"CR2 VERSION: {header['version']}",
        f"RAW IFD OFFSET: {utils.hexify(header['raw-ifd-offset'], 8)}",
    ])


def format_ifd(ifd, index):
    lines = [f"NUMBER OF ENTRIES: {ifd['entry-count']}"]

    for i, entry in enumerate(ifd["entries"]):
        entry_lines = [
            f"TAG ID: {entry['id']}",
            f"TAG TYPE: {entry['type']}",
            f"NUMBER OF VALUES: {entry['count']}",
            f"VALUE: {utils.hexify(entry['offset-or-value'], 8)}",
        ]

        if entry.get("values") is not None:
            entry_lines.append(f"DECODED: {entry['values']}")

        lines.append(_block(f"ENTRY#{i}", entry_lines).replace("\n", "\n\t"))

    lines.append(f"NEXT IFD OFFSET: {utils.hexify(ifd['next-ifd-offset'], 8)}")

    return _block(f"IFD#{index}", lines)


def _format_field(key, value):
    if value is None:
        return UNSET

    match key:
        case "compression":
            return value["name"]
        case "focal-length":
            return f"{value}mm"

    return str(value)


def format_image_info(info):
    width = max(len(label) for label, _ in IMAGE_INFO_FIELDS) + 2

    return _block("ImageInfo", [
        f"{(label + ':').ljust(width)}{_format_field(key, info.get(key))}"
        for label, key in IMAGE_INFO_FIELDS
    ])


def format_report(meta):
    match meta.get("type"):
        case "cr2" | "tiff":
            parts = [format_header(meta["header"])]
            parts += [
                format_ifd(ifd, i) for i, ifd in enumerate(meta["ifds"])
            ]
            parts.append(format_image_info(meta["image-info"]))
            return "\n".join(parts)
        case _:
            return _block("Error", [
                f"{meta['error-type']}: {meta['error-message']}",
            ])
