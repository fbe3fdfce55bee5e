from typing import Iterable, Optional, Tuple


def normalize_hostname(host: Optional[str]) -> str:
    """Lower-case hostname without port or trailing dot."""
    if not host:
        return ""
    host = host.split(",")[0].strip().lower()
    if host.startswith("["):
        # IPv6 literal
        return host.split("]")[0] + "]"
    return host.split(":")[0].rstrip(".")


def is_ignored_domain(hostname: str, ignored_domains: Iterable[str]) -> bool:
    """Development and preview hosts never resolve to a tenant."""
    if not hostname:
        return True
    return any(
        hostname == domain or hostname.endswith(f".{domain}")
        for domain in ignored_domains
    )


def is_main_domain(hostname: str, main_domains: Iterable[str]) -> bool:
    if not hostname:
        return True
    for domain in main_domains:
        if hostname in (domain, f"www.{domain}"):
            return True
    return False


def split_subdomain(
    hostname: str,
    main_domains: Iterable[str],
) -> Tuple[Optional[str], Optional[str]]:
    """
    Split `<sub>.<main domain>` into (sub, main domain).

    `www` is not a tenant subdomain.
    """
    for domain in main_domains:
        suffix = f".{domain}"
        if hostname.endswith(suffix):
            subdomain = hostname[: -len(suffix)]
            if subdomain == "www":
                return None, domain
            return subdomain, domain
    return None, None


def extract_domain_to_check(
    hostname: Optional[str],
    *,
    main_domains: Iterable[str],
    ignored_domains: Iterable[str],
) -> Optional[str]:
    """
    The value to look a tenant up by, or None for the platform itself.

    Subdomains of a main domain yield the subdomain label; any other
    host is treated as a tenant's custom domain.
    """
    hostname = normalize_hostname(hostname)
    main_domains = list(main_domains)

    if (
        not hostname
        or is_ignored_domain(hostname, ignored_domains)
        or is_main_domain(hostname, main_domains)
    ):
        return None

    subdomain, _ = split_subdomain(hostname, main_domains)
    if subdomain:
        return subdomain

    return hostname
