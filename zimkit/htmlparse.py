"""A forgiving HTML tokenizer that reports text, opening tags and closing tags."""

from __future__ import annotations

import re

NAMED_ENTITIES: dict[str, int] = {
    "quot": 34, "amp": 38, "apos": 39, "lt": 60, "gt": 62,
    "nbsp": 160, "iexcl": 161, "cent": 162, "pound": 163, "curren": 164,
    "yen": 165, "brvbar": 166, "sect": 167, "uml": 168, "copy": 169,
    "ordf": 170, "laquo": 171, "not": 172, "shy": 173, "reg": 174,
    "macr": 175, "deg": 176, "plusmn": 177, "sup2": 178, "sup3": 179,
    "acute": 180, "micro": 181, "para": 182, "middot": 183, "cedil": 184,
    "sup1": 185, "ordm": 186, "raquo": 187, "frac14": 188, "frac12": 189,
    "frac34": 190, "iquest": 191, "Agrave": 192, "Aacute": 193, "Acirc": 194,
    "Atilde": 195, "Auml": 196, "Aring": 197, "AElig": 198, "Ccedil": 199,
    "Egrave": 200, "Eacute": 201, "Ecirc": 202, "Euml": 203, "Igrave": 204,
    "Iacute": 205, "Icirc": 206, "Iuml": 207, "ETH": 208, "Ntilde": 209,
    "Ograve": 210, "Oacute": 211, "Ocirc": 212, "Otilde": 213, "Ouml": 214,
    "times": 215, "Oslash": 216, "Ugrave": 217, "Uacute": 218, "Ucirc": 219,
    "Uuml": 220, "Yacute": 221, "THORN": 222, "szlig": 223, "agrave": 224,
    "aacute": 225, "acirc": 226, "atilde": 227, "auml": 228, "aring": 229,
    "aelig": 230, "ccedil": 231, "egrave": 232, "eacute": 233, "ecirc": 234,
    "euml": 235, "igrave": 236, "iacute": 237, "icirc": 238, "iuml": 239,
    "eth": 240, "ntilde": 241, "ograve": 242, "oacute": 243, "ocirc": 244,
    "otilde": 245, "ouml": 246, "divide": 247, "oslash": 248, "ugrave": 249,
    "uacute": 250, "ucirc": 251, "uuml": 252, "yacute": 253, "thorn": 254,
    "yuml": 255, "OElig": 338, "oelig": 339, "Scaron": 352, "scaron": 353,
    "Yuml": 376, "fnof": 402, "circ": 710, "tilde": 732,
    "Alpha": 913, "Beta": 914, "Gamma": 915, "Delta": 916, "Epsilon": 917,
    "Zeta": 918, "Eta": 919, "Theta": 920, "Iota": 921, "Kappa": 922,
    "Lambda": 923, "Mu": 924, "Nu": 925, "Xi": 926, "Omicron": 927,
    "Pi": 928, "Rho": 929, "Sigma": 931, "Tau": 932, "Upsilon": 933,
    "Phi": 934, "Chi": 935, "Psi": 936, "Omega": 937,
    "alpha": 945, "beta": 946, "gamma": 947, "delta": 948, "epsilon": 949,
    "zeta": 950, "eta": 951, "theta": 952, "iota": 953, "kappa": 954,
    "lambda": 955, "mu": 956, "nu": 957, "xi": 958, "omicron": 959,
    "pi": 960, "rho": 961, "sigmaf": 962, "sigma": 963, "tau": 964,
    "upsilon": 965, "phi": 966, "chi": 967, "psi": 968, "omega": 969,
    "thetasym": 977, "upsih": 978, "piv": 982,
    "ensp": 8194, "emsp": 8195, "thinsp": 8201, "zwnj": 8204, "zwj": 8205,
    "lrm": 8206, "rlm": 8207, "ndash": 8211, "mdash": 8212, "lsquo": 8216,
    "rsquo": 8217, "sbquo": 8218, "ldquo": 8220, "rdquo": 8221, "bdquo": 8222,
    "dagger": 8224, "Dagger": 8225, "bull": 8226, "hellip": 8230,
    "permil": 8240, "prime": 8242, "Prime": 8243, "lsaquo": 8249,
    "rsaquo": 8250, "oline": 8254, "frasl": 8260, "euro": 8364,
    "image": 8465, "weierp": 8472, "real": 8476, "trade": 8482,
    "alefsym": 8501, "larr": 8592, "uarr": 8593, "rarr": 8594, "darr": 8595,
    "harr": 8596, "crarr": 8629, "lArr": 8656, "uArr": 8657, "rArr": 8658,
    "dArr": 8659, "hArr": 8660, "forall": 8704, "part": 8706, "exist": 8707,
    "empty": 8709, "nabla": 8711, "isin": 8712, "notin": 8713, "ni": 8715,
    "prod": 8719, "sum": 8721, "minus": 8722, "lowast": 8727, "radic": 8730,
    "prop": 8733, "infin": 8734, "ang": 8736, "and": 8743, "or": 8744,
    "cap": 8745, "cup": 8746, "int": 8747, "there4": 8756, "sim": 8764,
    "cong": 8773, "asymp": 8776, "ne": 8800, "equiv": 8801, "le": 8804,
    "ge": 8805, "sub": 8834, "sup": 8835, "nsub": 8836, "sube": 8838,
    "supe": 8839, "oplus": 8853, "otimes": 8855, "perp": 8869, "sdot": 8901,
    "lceil": 8968, "rceil": 8969, "lfloor": 8970, "rfloor": 8971,
    "lang": 9001, "rang": 9002, "loz": 9674, "spades": 9824, "clubs": 9827,
    "hearts": 9829, "diams": 9830,
}

_SPACE = " \t\n\v\f\r"
_ALPHA = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")

_NOT_DIGIT = re.compile(r"[^0-9]")
_NOT_XDIGIT = re.compile(r"[^0-9A-Fa-f]")
_NOT_ALNUM = re.compile(r"[^0-9A-Za-z]")
_NOT_SPACE = re.compile(r"[^ \t\n\v\f\r]")
_NOT_TAG = re.compile(r"[^0-9A-Za-z.\-:]")  # ':' for XML namespaces
_SPACE_GT = re.compile(r"[ \t\n\v\f\r>]")
_SPACE_EQ_GT = re.compile(r"[ \t\n\v\f\r=>]")

_HTDIG_END = "<!--/htdig_noindex-->"


def _scan(pattern: re.Pattern, text: str, pos: int) -> int:
    """Position of the first match of ``pattern`` at or after ``pos``, or len(text)."""
    match = pattern.search(text, pos)
    return match.start() if match else len(text)


def _find(text: str, char: str, pos: int) -> int:
    found = text.find(char, pos)
    return len(text) if found < 0 else found


def _ascii_lower(text: str) -> str:
    return text.translate(_LOWER)


def decode_entities(text: str) -> str:
    """Replace named, decimal and hexadecimal character references.

    Unknown or null references are left untouched; the trailing ``;`` is optional.
    """
    n = len(text)
    pieces: list[str] = []
    copied = 0
    search = 0
    while True:
        amp = text.find("&", search)
        if amp < 0:
            break
        p = amp + 1
        if p < n and text[p] == "#":
            p += 1
            if p < n and text[p] in "xX":
                p += 1
                end = _scan(_NOT_XDIGIT, text, p)
                value = int(text[p:end], 16) if end > p else 0
            else:
                end = _scan(_NOT_DIGIT, text, p)
                value = int(text[p:end]) if end > p else 0
        else:
            end = _scan(_NOT_ALNUM, text, p)
            value = NAMED_ENTITIES.get(text[p:end], 0)
        if end < n and text[end] == ";":
            end += 1
        if 0 < value <= 0x10FFFF:
            pieces.append(text[copied:amp])
            pieces.append(chr(value))
            copied = end
        search = end
    pieces.append(text[copied:])
    return "".join(pieces)


class HtmlParser:
    """Walks an HTML document and calls the tag and text hooks in order.

    Subclasses override :meth:`process_text`, :meth:`opening_tag` and
    :meth:`closing_tag`; while an opening tag is reported its attributes are
    available through :meth:`get_parameter`.
    """

    def __init__(self):
        self.in_script = False
        self.charset = ""
        self._parameters: dict[str, str] = {}

    def get_parameter(self, name: str) -> str | None:
        """Value of attribute ``name`` of the tag being opened, or None."""
        return self._parameters.get(name)

    def process_text(self, text: str) -> None:
        """Called with each run of text between tags, entities decoded."""

    def opening_tag(self, tag: str) -> None:
        """Called with the lower-cased name of each opening tag."""

    def closing_tag(self, tag: str) -> None:
        """Called with the lower-cased name of each closing tag."""

    def parse_html(self, body: str) -> None:
        """Parse ``body`` from start to end, calling the hooks."""
        self.in_script = False
        self._parameters = {}
        n = len(body)
        start = 0

        while True:
            # Find the next tag, comment or declaration; isolated '<' are text.
            p = start
            while True:
                p = body.find("<", p)
                if p < 0:
                    p = n
                    break
                ch = body[p + 1] if p + 1 < n else "\0"
                if (not self.in_script and ch in _ALPHA) or ch in "/!":
                    break
                if ch == "?":
                    self._read_xml_declaration(body, p)
                    break
                p += 1

            if p > start:
                self.process_text(decode_entities(body[start:p]))

            if p == n:
                break
            start = p + 1
            if start == n:
                break

            if body[start] == "!":
                start += 1
                if start == n:
                    break
                start += 1
                if start == n:
                    break
                if body[start - 1] == "-" and body[start] == "-":
                    start += 1
                    close = body.find(">", start)
                    # An unterminated comment swallows the rest of the document.
                    if close < 0:
                        break
                    p = close
                    while p != n and (body[p - 1] != "-" or body[p - 2] != "-"):
                        p = _find(body, ">", p + 1)
                    if p != n:
                        if p - start == 15 and body[start:p - 2] == "htdig_noindex":
                            i = body.find(_HTDIG_END, p + 1)
                            if i < 0:
                                break
                            start = i + len(_HTDIG_END)
                            continue
                        start = p
                    else:
                        start = close
                else:
                    # An SGML declaration such as a DOCTYPE: ignored.
                    start = body.find(">", start - 1)
                    if start < 0:
                        break
                start += 1
            elif body[start] == "?":
                start += 1
                if start == n:
                    break
                # Processing instruction: swallow until '?>' or the end.
                start = _find(body, ">", start + 1)
                while start != n and body[start - 1] != "?":
                    start = _find(body, ">", start + 1)
                if start != n:
                    start += 1
            else:
                closing = False
                if body[start] == "/":
                    closing = True
                    start = _scan(_NOT_SPACE, body, start + 1)
                p = start
                start = _scan(_NOT_TAG, body, start)
                tag = _ascii_lower(body[p:start])

                if closing:
                    self.closing_tag(tag)
                    if self.in_script and tag == "script":
                        self.in_script = False
                    # Parameters on closing tags are ignored.
                    p = body.find(">", start)
                    if p < 0:
                        break
                    start = p + 1
                else:
                    start = self._read_parameters(body, start)
                    self.opening_tag(tag)
                    self._parameters = {}
                    # Inside <script>, '<' followed by a letter is not a tag.
                    if tag == "script":
                        self.in_script = True
                    if start < n and body[start] == ">":
                        start += 1

    def _read_parameters(self, body: str, start: int) -> int:
        n = len(body)
        while start < n and body[start] != ">":
            p = _scan(_SPACE_EQ_GT, body, start)
            name = body[start:p]
            start = _scan(_NOT_SPACE, body, p)
            if start != n and body[start] == "=":
                start = _scan(_NOT_SPACE, body, start + 1)
                p = n
                quote = body[start] if start < n else "\0"
                if quote in "\"'":
                    start += 1
                    p = _find(body, quote, start)
                if p == n:
                    # Unquoted value, or no closing quote.
                    p = _scan(_SPACE_GT, body, start)
                value = body[start:p]
                start = _scan(_NOT_SPACE, body, p)
                if name:
                    # With repeated attributes the first one wins.
                    self._parameters.setdefault(_ascii_lower(name), value)
        return start

    def _read_xml_declaration(self, body: str, p: int) -> None:
        # Only valid at the very start of the document.
        if p != 0 or len(body) < 20:
            return
        if body[2:5] != "xml":
            return
        if body[5] not in " \t\r\n\0":
            return
        decl_end = body.find("?", 6)
        if decl_end < 0:
            return
        self.charset = "UTF-8"
        decl = body[6:decl_end]
        enc = decl.find("encoding")
        if enc < 0:
            return
        enc = _first_not_of_blank(decl, enc + 8)
        if enc < 0 or decl[enc] != "=":
            return
        enc = _first_not_of_blank(decl, enc + 1)
        if enc < 0 or decl[enc] not in "\"'":
            return
        quote = decl[enc]
        enc += 1
        enc_end = decl.find(quote, enc)
        self.charset = decl[enc:] if enc_end < 0 else decl[enc:enc_end]


def _first_not_of_blank(text: str, pos: int) -> int:
    for i in range(pos, len(text)):
        if text[i] not in " \t\r\n":
            return i
    return -1