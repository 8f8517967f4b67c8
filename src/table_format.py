# src/table_format.py
"""Text renderings of a dimming table for pasting into firmware sources."""


def to_c_array(table, var_name="dim_curve", per_line=16):
    lines = [f"static const uint16_t {var_name}[{len(table)}] = {{"]
    for i in range(0, len(table), per_line):
        chunk = table[i:i + per_line]
        lines.append("    " + ", ".join(f"{int(v):4d}" for v in chunk) + ",")
    lines.append("};")
    return "\n".join(lines)


def to_rows(table, per_line=16):
    """
    One line per chunk, prefixed with the index of its first entry:
      000: 0 4 8 ...
    """
    lines = []
    for i in range(0, len(table), per_line):
        chunk = table[i:i + per_line]
        lines.append(f"{i:03d}: " + " ".join(str(int(v)) for v in chunk))
    return "\n".join(lines)


FORMATTERS = {
    "c": to_c_array,
    "rows": to_rows,
}
