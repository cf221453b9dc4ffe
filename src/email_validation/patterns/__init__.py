"""Padrões de formato de endereço de email.

- STRICT_EMAIL_ADDRESS: local-part RFC822 + domínio RFC1035
- UNRESTRICTED_EMAIL_ADDRESS: addr-spec RFC822 completo
"""

import re

from email_validation.patterns import rfc822, rfc1035

UNRESTRICTED_EMAIL_ADDRESS = rfc822.EMAIL_ADDRESS
STRICT_EMAIL_ADDRESS = re.compile(rf"{rfc822.LOCAL_PART}\x40{rfc1035.DOMAIN}")


def pattern_for(strict: bool) -> re.Pattern[str]:
    """Retorna o padrão compilado para o modo informado."""
    return STRICT_EMAIL_ADDRESS if strict else UNRESTRICTED_EMAIL_ADDRESS


__all__ = [
    "STRICT_EMAIL_ADDRESS",
    "UNRESTRICTED_EMAIL_ADDRESS",
    "pattern_for",
]
