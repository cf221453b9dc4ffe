"""Gramática de endereço RFC822 (addr-spec).

As peças são mantidas como strings para que o padrão estrito possa
reaproveitar a local-part e trocar apenas o domínio. Apenas ASCII:
qualquer code point acima de 0x7f fica fora das classes.
"""

import re

QTEXT = r"[^\x0d\x22\x5c\x80-\U0010ffff]"
DTEXT = r"[^\x0d\x5b-\x5d\x80-\U0010ffff]"
ATOM = r"[^\x00-\x20\x22\x28\x29\x2c\x2e\x3a-\x3c\x3e\x40\x5b-\x5d\x7f-\U0010ffff]+"
QUOTED_PAIR = r"\x5c[\x00-\x7f]"

DOMAIN_LITERAL = rf"\x5b(?:{DTEXT}|{QUOTED_PAIR})*\x5d"
QUOTED_STRING = rf"\x22(?:{QTEXT}|{QUOTED_PAIR})*\x22"

DOMAIN_REF = ATOM
SUB_DOMAIN = rf"(?:{DOMAIN_REF}|{DOMAIN_LITERAL})"
WORD = rf"(?:{ATOM}|{QUOTED_STRING})"

DOMAIN = rf"{SUB_DOMAIN}(?:\x2e{SUB_DOMAIN})*"
LOCAL_PART = rf"{WORD}(?:\x2e{WORD})*"

ADDR_SPEC = rf"{LOCAL_PART}\x40{DOMAIN}"

EMAIL_ADDRESS = re.compile(ADDR_SPEC)
