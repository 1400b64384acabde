from enum import Enum


class Tag(Enum):
    A = 'a'
    ABBR = 'abbr'
    ADDRESS = 'address'
    AREA = 'area'
    ARTICLE = 'article'
    ASIDE = 'aside'
    AUDIO = 'audio'
    B = 'b'
    BASE = 'base'
    BDI = 'bdi'
    BDO = 'bdo'
    BLOCKQUOTE = 'blockquote'
    BODY = 'body'
    BR = 'br'
    BUTTON = 'button'
    CANVAS = 'canvas'
    CAPTION = 'caption'
    CITE = 'cite'
    CODE = 'code'
    COL = 'col'
    COLGROUP = 'colgroup'
    DATA = 'data'
    DATALIST = 'datalist'
    DD = 'dd'
    DEL = 'del'
    DETAILS = 'details'
    DFN = 'dfn'
    DIALOG = 'dialog'
    DIV = 'div'
    DL = 'dl'
    DT = 'dt'
    EM = 'em'
    EMBED = 'embed'
    FIELDSET = 'fieldset'
    FIGCAPTION = 'figcaption'
    FIGURE = 'figure'
    FOOTER = 'footer'
    FORM = 'form'
    H1 = 'h1'
    H2 = 'h2'
    H3 = 'h3'
    H4 = 'h4'
    H5 = 'h5'
    H6 = 'h6'
    HEAD = 'head'
    HEADER = 'header'
    HR = 'hr'
    HTML = 'html'
    I = 'i'  # noqa
    IFRAME = 'iframe'
    IMG = 'img'
    INPUT = 'input'
    INS = 'ins'
    KBD = 'kbd'
    LABEL = 'label'
    LEGEND = 'legend'
    LI = 'li'
    LINK = 'link'
    MAIN = 'main'
    MAP = 'map'
    MARK = 'mark'
    MATH = 'math'
    MENU = 'menu'
    META = 'meta'
    METER = 'meter'
    NAV = 'nav'
    NOSCRIPT = 'noscript'
    OBJECT = 'object'
    OL = 'ol'
    OPTGROUP = 'optgroup'
    OPTION = 'option'
    OUTPUT = 'output'
    P = 'p'
    PICTURE = 'picture'
    PRE = 'pre'
    PROGRESS = 'progress'
    Q = 'q'
    RP = 'rp'
    RT = 'rt'
    RUBY = 'ruby'
    S = 's'
    SAMP = 'samp'
    SCRIPT = 'script'
    SEARCH = 'search'
    SECTION = 'section'
    SELECT = 'select'
    SLOT = 'slot'
    SMALL = 'small'
    SOURCE = 'source'
    SPAN = 'span'
    STRONG = 'strong'
    STYLE = 'style'
    SUB = 'sub'
    SUMMARY = 'summary'
    SUP = 'sup'
    SVG = 'svg'
    TABLE = 'table'
    TBODY = 'tbody'
    TD = 'td'
    TEMPLATE = 'template'
    TEXTAREA = 'textarea'
    TFOOT = 'tfoot'
    TH = 'th'
    THEAD = 'thead'
    TIME = 'time'
    TITLE = 'title'
    TR = 'tr'
    TRACK = 'track'
    U = 'u'
    UL = 'ul'
    VAR = 'var'
    VIDEO = 'video'
    WBR = 'wbr'


EMBEDDED = (
    Tag.AUDIO, Tag.CANVAS, Tag.EMBED, Tag.IFRAME, Tag.IMG, Tag.OBJECT,
    Tag.PICTURE, Tag.SVG, Tag.VIDEO,
)

FLOW = (
    Tag.A, Tag.ABBR, Tag.ADDRESS, Tag.AREA, Tag.ARTICLE, Tag.ASIDE,
    Tag.AUDIO, Tag.B, Tag.BDI, Tag.BDO, Tag.BLOCKQUOTE, Tag.BR, Tag.BUTTON,
    Tag.CANVAS, Tag.CITE, Tag.CODE, Tag.DATA, Tag.DATALIST, Tag.DEL,
    Tag.DETAILS, Tag.DFN, Tag.DIALOG, Tag.DIV, Tag.DL, Tag.EM, Tag.EMBED,
    Tag.FIELDSET, Tag.FIGURE, Tag.FOOTER, Tag.FORM, Tag.H1, Tag.H2, Tag.H3,
    Tag.H4, Tag.H5, Tag.H6, Tag.HEADER, Tag.HR, Tag.I, Tag.IFRAME, Tag.IMG,
    Tag.INPUT, Tag.INS, Tag.KBD, Tag.LABEL, Tag.MAIN, Tag.MAP, Tag.MARK,
    Tag.MATH, Tag.MENU, Tag.METER, Tag.NAV, Tag.NOSCRIPT, Tag.OBJECT, Tag.OL,
    Tag.OUTPUT, Tag.P, Tag.PICTURE, Tag.PRE, Tag.PROGRESS, Tag.Q, Tag.RUBY,
    Tag.S, Tag.SAMP, Tag.SCRIPT, Tag.SEARCH, Tag.SECTION, Tag.SELECT,
    Tag.SLOT, Tag.SMALL, Tag.SPAN, Tag.STRONG, Tag.SUB, Tag.SUP, Tag.SVG,
    Tag.TABLE, Tag.TEMPLATE, Tag.TEXTAREA, Tag.TIME, Tag.U, Tag.UL, Tag.VAR,
    Tag.VIDEO, Tag.WBR,
)

FORM_ASSOCIATED = (
    Tag.BUTTON, Tag.FIELDSET, Tag.INPUT, Tag.LABEL, Tag.METER, Tag.OBJECT,
    Tag.OUTPUT, Tag.PROGRESS, Tag.SELECT, Tag.TEXTAREA,
)

HEADING = (Tag.H1, Tag.H2, Tag.H3, Tag.H4, Tag.H5, Tag.H6)

INTERACTIVE = (
    Tag.A, Tag.BUTTON, Tag.DETAILS, Tag.EMBED, Tag.IFRAME, Tag.INPUT,
    Tag.LABEL, Tag.SELECT, Tag.TEXTAREA, Tag.VIDEO,
)

LISTING = (Tag.DD, Tag.DL, Tag.DT, Tag.LI, Tag.MENU, Tag.OL, Tag.UL)

METADATA = (
    Tag.BASE, Tag.LINK, Tag.META, Tag.NOSCRIPT, Tag.SCRIPT, Tag.STYLE,
    Tag.TEMPLATE, Tag.TITLE,
)

PALPABLE = (
    Tag.A, Tag.ABBR, Tag.ADDRESS, Tag.ARTICLE, Tag.ASIDE, Tag.AUDIO, Tag.B,
    Tag.BDI, Tag.BDO, Tag.BLOCKQUOTE, Tag.BUTTON, Tag.CANVAS, Tag.CITE,
    Tag.CODE, Tag.DATA, Tag.DETAILS, Tag.DFN, Tag.DIV, Tag.DL, Tag.EM,
    Tag.EMBED, Tag.FIELDSET, Tag.FIGURE, Tag.FOOTER, Tag.FORM, Tag.H1,
    Tag.H2, Tag.H3, Tag.H4, Tag.H5, Tag.H6, Tag.HEADER, Tag.I, Tag.IFRAME,
    Tag.IMG, Tag.INPUT, Tag.INS, Tag.KBD, Tag.LABEL, Tag.MAIN, Tag.MAP,
    Tag.MARK, Tag.METER, Tag.NAV, Tag.OBJECT, Tag.OL, Tag.OUTPUT, Tag.P,
    Tag.PRE, Tag.PROGRESS, Tag.Q, Tag.RUBY, Tag.S, Tag.SAMP, Tag.SECTION,
    Tag.SELECT, Tag.SMALL, Tag.SPAN, Tag.STRONG, Tag.SUB, Tag.SUMMARY,
    Tag.SUP, Tag.SVG, Tag.TABLE, Tag.TEXTAREA, Tag.TIME, Tag.U, Tag.UL,
    Tag.VAR, Tag.VIDEO,
)

PHRASING = (
    Tag.A, Tag.ABBR, Tag.AREA, Tag.AUDIO, Tag.B, Tag.BDI, Tag.BDO, Tag.BR,
    Tag.BUTTON, Tag.CITE, Tag.CODE, Tag.DATA, Tag.DFN, Tag.EM, Tag.EMBED,
    Tag.I, Tag.IFRAME, Tag.IMG, Tag.INPUT, Tag.KBD, Tag.LABEL, Tag.MAP,
    Tag.MARK, Tag.METER, Tag.NOSCRIPT, Tag.OBJECT, Tag.OUTPUT, Tag.PICTURE,
    Tag.PROGRESS, Tag.Q, Tag.RP, Tag.RT, Tag.RUBY, Tag.S, Tag.SAMP,
    Tag.SCRIPT, Tag.SELECT, Tag.SMALL, Tag.SPAN, Tag.STRONG, Tag.SUB,
    Tag.SUP, Tag.SVG, Tag.TEXTAREA, Tag.TIME, Tag.U, Tag.VAR, Tag.VIDEO,
    Tag.WBR,
)

ROOT = (Tag.BODY, Tag.HEAD, Tag.HTML)

SCRIPT_SUPPORTING = (Tag.NOSCRIPT, Tag.SCRIPT, Tag.TEMPLATE)

SECTIONING = (Tag.ARTICLE, Tag.ASIDE, Tag.NAV, Tag.SECTION)

TABLE = (
    Tag.CAPTION, Tag.COL, Tag.COLGROUP, Tag.TABLE, Tag.TBODY, Tag.TD,
    Tag.TFOOT, Tag.TH, Tag.THEAD, Tag.TR,
)

# `param` is obsolete in HTML and intentionally absent
VOID = (
    Tag.AREA, Tag.BASE, Tag.BR, Tag.COL, Tag.EMBED, Tag.HR, Tag.IMG,
    Tag.INPUT, Tag.LINK, Tag.META, Tag.SOURCE, Tag.TRACK, Tag.WBR,
)

CATEGORIES = {
    'embedded': EMBEDDED,
    'flow': FLOW,
    'form-associated': FORM_ASSOCIATED,
    'heading': HEADING,
    'interactive': INTERACTIVE,
    'listing': LISTING,
    'metadata': METADATA,
    'palpable': PALPABLE,
    'phrasing': PHRASING,
    'root': ROOT,
    'script-supporting': SCRIPT_SUPPORTING,
    'sectioning': SECTIONING,
    'table': TABLE,
    'void': VOID,
}
