"""Scan configuration — whitelist, standard library, GitHub client settings.

Defaults ship with the tool; ``Config.from_env()`` applies overrides from
``LIC_*`` environment variables.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field, replace

import structlog

log = structlog.get_logger("lic.config")

DEFAULT_WHITELIST_DOMAINS: tuple[str, ...] = ("github.com", "gopkg.in", "golang.org")

# Go 1.24 standard library
_STDLIB_PACKAGES = """
archive archive/tar archive/zip
bufio builtin bytes
cmp
compress compress/bzip2 compress/flate compress/gzip compress/lzw compress/zlib
container container/heap container/list container/ring
context
crypto crypto/aes crypto/cipher crypto/des crypto/dsa crypto/ecdh crypto/ecdsa crypto/ed25519
crypto/elliptic crypto/hmac crypto/md5 crypto/rand crypto/rc4 crypto/rsa crypto/sha1
crypto/sha256 crypto/sha512 crypto/subtle crypto/tls crypto/x509 crypto/x509/pkix
database database/sql database/sql/driver
debug debug/buildinfo debug/dwarf debug/elf debug/gosym debug/macho debug/pe debug/plan9obj
embed
encoding encoding/ascii85 encoding/asn1 encoding/base32 encoding/base64 encoding/binary
encoding/csv encoding/gob encoding/hex encoding/json encoding/pem encoding/xml
errors expvar flag fmt
go go/ast go/build go/build/constraint go/constant go/doc go/format go/importer go/parser
go/printer go/scanner go/token go/types
hash hash/adler32 hash/crc32 hash/crc64 hash/fnv hash/maphash
html html/template
image image/color image/color/palette image/draw image/gif image/jpeg image/png
index index/suffixarray
io io/fs io/ioutil iter
log log/slog log/syslog
maps
math math/big math/bits math/cmplx math/rand math/rand/v2
mime mime/multipart mime/quotedprintable
net net/http net/http/cgi net/http/cookiejar net/http/fcgi net/http/httptest
net/http/httptrace net/http/httputil net/http/pprof net/mail net/netip net/rpc
net/rpc/jsonrpc net/smtp net/textproto net/url
os os/exec os/signal os/user
path path/filepath
plugin reflect
regexp regexp/syntax
runtime runtime/cgo runtime/coverage runtime/debug runtime/metrics runtime/pprof runtime/trace
slices sort strconv strings structs
sync sync/atomic
syscall syscall/js
testing testing/fstest testing/iotest testing/quick testing/slogtest
text text/scanner text/tabwriter text/template text/template/parse
time
unicode unicode/utf16 unicode/utf8 unique
unsafe weak
"""

DEFAULT_STDLIB_PACKAGES: frozenset[str] = frozenset(_STDLIB_PACKAGES.split())


def matches_domain(import_path: str, domain: str) -> bool:
    """True if *import_path* is *domain* itself or lives under ``domain/``.

    A domain never matches as a bare substring: ``mygithub.company.com/x``
    and ``evil.com/github.com/x`` are not under ``github.com``.
    """
    domain = domain.strip().rstrip("/")
    if not domain:
        return False
    return import_path == domain or import_path.startswith(domain + "/")


@dataclass(frozen=True)
class GolangConfig:
    """Whitelist and standard-library settings for Go scans."""

    whitelist_domains: tuple[str, ...] = DEFAULT_WHITELIST_DOMAINS
    stdlib_packages: frozenset[str] = DEFAULT_STDLIB_PACKAGES

    def is_stdlib(self, package: str) -> bool:
        return package in self.stdlib_packages

    def is_whitelisted(self, import_path: str) -> bool:
        return any(matches_domain(import_path, d) for d in self.whitelist_domains)


@dataclass(frozen=True)
class GitHubSettings:
    """Client settings for the GitHub license provider."""

    token: str | None = None
    max_retries: int = 3
    base_delay: float = 1.0  # seconds
    max_delay: float = 30.0
    request_timeout: float = 10.0
    rate_limit_max_wait: float = 15 * 60
    rate_limit_total_wait: float = 30 * 60


@dataclass(frozen=True)
class Config:
    golang: GolangConfig = field(default_factory=GolangConfig)
    github: GitHubSettings = field(default_factory=GitHubSettings)

    @classmethod
    def from_env(cls) -> Config:
        """Build a config from defaults plus ``LIC_*`` environment overrides.

        Environment variables:
            LIC_WHITELIST_DOMAINS   — comma list, replaces the default whitelist
            LIC_STDLIB_EXTRA        — comma list, added to the standard library set
            LIC_GITHUB_ACCESS_TOKEN — API token (falls back to GITHUB_TOKEN)
            LIC_GITHUB_MAX_RETRIES  — retries after the first attempt
            LIC_GITHUB_TIMEOUT      — per-attempt timeout in seconds

        Malformed or out-of-range numbers are logged and the default is kept.
        """
        golang = GolangConfig()
        domains = _env_list("LIC_WHITELIST_DOMAINS")
        if domains:
            golang = replace(golang, whitelist_domains=tuple(domains))
        extra = _env_list("LIC_STDLIB_EXTRA")
        if extra:
            golang = replace(golang, stdlib_packages=golang.stdlib_packages | frozenset(extra))

        github = GitHubSettings(
            token=os.environ.get("LIC_GITHUB_ACCESS_TOKEN") or os.environ.get("GITHUB_TOKEN"),
            max_retries=_env_int("LIC_GITHUB_MAX_RETRIES", GitHubSettings.max_retries),
            request_timeout=_env_float("LIC_GITHUB_TIMEOUT", GitHubSettings.request_timeout),
        )
        return cls(golang=golang, github=github)

    def with_whitelist(self, domains: tuple[str, ...] | list[str]) -> Config:
        """Return a copy with the whitelist replaced (used by CLI overrides)."""
        return replace(self, golang=replace(self.golang, whitelist_domains=tuple(domains)))


def _env_list(key: str) -> list[str]:
    raw = os.environ.get(key, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        value = -1
    if value < 0:
        log.warning("config.invalid_env", key=key, value=raw, default=default)
        return default
    return value


def _env_float(key: str, default: float) -> float:
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        value = math.nan
    # must be a positive, finite number of seconds
    if not (math.isfinite(value) and value > 0):
        log.warning("config.invalid_env", key=key, value=raw, default=default)
        return default
    return value
