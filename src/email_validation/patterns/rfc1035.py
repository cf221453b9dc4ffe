"""Regras de nome de host RFC1035 para a parte de domínio.

Labels começam e terminam com letra ou dígito (dígitos iniciais
aceitos, como em 123.com) e têm ao menos dois caracteres. Literais
entre colchetes não são aceitos.
"""

LET_DIG = r"[\x30-\x39\x41-\x5a\x61-\x7a]"
LET_DIG_HYP = r"[\x2d\x30-\x39\x41-\x5a\x61-\x7a]"

LABEL = rf"{LET_DIG}{LET_DIG_HYP}*{LET_DIG}"
SUBDOMAIN = rf"(?:{LABEL}\.)*{LABEL}"

DOMAIN = SUBDOMAIN
