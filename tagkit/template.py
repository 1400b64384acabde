import os
import re


def render(template, tokens):
    """Substitutes tokens line by line, dropping lines left empty.

    Literal ``\\n`` sequences in the template are line breaks. Longer
    tokens win over their prefixes and substituted text is never scanned
    again.
    """
    template = template.replace('\\n', '\n')
    pattern = None
    keys = sorted((key for key in tokens if key), key=len, reverse=True)
    if keys:
        pattern = re.compile('|'.join(re.escape(key) for key in keys))

    def replace(match):
        value = tokens[match.group()]
        return '' if value is None else str(value)

    lines = []
    for line in template.split('\n'):
        if pattern is not None:
            line = pattern.sub(replace, line)
        if line != '':
            lines.append(line)
    return os.linesep.join(lines)
