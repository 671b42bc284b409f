from ansi import RESET, color_escape


def render(cells, columns, plain=False):
    response = ""

    for top in range(0, len(cells), columns):
        row = cells[top:top + columns]

        if plain:
            response += "".join(char for char, _ in row) + "\n"
            continue

        last_color = None
        for i, (char, color) in enumerate(row):
            # Only restyle when the color changes; the terminal keeps the
            # previous escape active for the rest of the run.
            if i == 0 or color != last_color:
                response += color_escape(color) + char
            else:
                response += char
            last_color = color

        response += RESET + "\n"

    return response
