def decode(content, encoding="utf-8"):
    try:
        return content.decode(encoding)
    except UnicodeDecodeError:
        return content.decode("latin-1")


def unraw(i, choices, default="unknown"):
    return {"raw": i, "name": choices.get(i, default)}


def hexify(i, width=4):
    return f"0x{hex(i)[2:].zfill(width)}"


def format_exposure(numerator, denominator):
    return f"{numerator}/{denominator}s"


def format_f_number(numerator, denominator):
    if denominator == 0:
        value = float("inf") if numerator else float("nan")
    else:
        value = numerator / denominator

    return f"f/{value:.1f}"
