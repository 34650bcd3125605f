"""
Built-in artist tag catalog
These are the candidate labels loaded when the page first opens.
Users can add more in the UI or import a .txt/.csv list; edits here need an app restart.
"""

ARTIST_TAGS = [
    "wlop",
    "ilya kuvshinov",
    "range murata",
    "yoshitaka amano",
    "alphonse mucha",
    "hokusai",
    "claude monet",
    "vincent van gogh",
    "gustav klimt",
    "john singer sargent",
    "j.c. leyendecker",
    "norman rockwell",
    "moebius",
    "katsuhiro otomo",
    "hayao miyazaki",
    "makoto shinkai",
    "takehiko inoue",
    "tsutomu nihei",
    "yoji shinkawa",
    "akihiko yoshida",
    "hiroshi nagai",
    "kilian eng",
    "simon stalenhag",
    "greg rutkowski",
    "james jean",
    "loish",
    "sakimichan",
    "krenz cushart",
    "rella",
    "mika pikazo",
    "fuzichoco",
    "redjuice",
    "huke",
    "lam",
    "as109",
    "ningen mame",
    "kantoku",
    "tony taka",
    "void 0",
    "ask (askzy)",
    "ciloranko",
    "wanke",
    "modare",
    "kawacy",
    "mignon",
    "shal.e",
    "ogipote",
    "nardack",
    "toosaka asagi",
    "mochizuki kei",
]
