"""Host name normalization shared by the filter and translation stages."""

from __future__ import annotations


def strip_hostname(target: str, postfix: str = "") -> str:
    """Normalize an SRV target into a resolvable host name.

    Removes one trailing ``.`` and then, when *postfix* is non-empty, the
    first occurrence of *postfix* (e.g. ``.service.consul``).

    >>> strip_hostname("node1.service.consul.", ".service.consul")
    'node1'
    """
    hostname = target[:-1] if target.endswith(".") else target
    if postfix:
        hostname = hostname.replace(postfix, "", 1)
    return hostname
