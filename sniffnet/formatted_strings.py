"""Helpers that turn traffic figures, paths and addresses into display strings."""

from __future__ import annotations

import ipaddress
import math
import struct
from pathlib import Path

import platformdirs

from sniffnet.language import Language
from sniffnet.translations.notifications import open_report_translation

APP_VERSION = "1.2.0"
"""Application version number, shown in the footer and in the welcome banner."""

_WELCOME_BANNER = r"""
  /---------------------------------------------------------\
 |     _____           _    __    __                  _      |
 |    / ____|         (_)  / _|  / _|                | |     |
 |   | (___    _ __    _  | |_  | |_   _ __     ___  | |_    |
 |    \___ \  | '_ \  | | |  _| |  _| | '_ \   / _ \ | __|   |
 |    ____) | | | | | | | | |   | |   | | | | |  __/ | |_    |
 |   |_____/  |_| |_| |_| |_|   |_|   |_| |_|  \___|  \__|   |
 |                                                           |
 |                   ___________                             |
 |                  /___________\                            |
 |                 | ___________ |                           |
 |                 | |         | |                           |
 |                 | | v{version}  | |                           |
 |                 | |_________| |________________________   |
 |                 \_____________/   network traffic app  )  |
 |                 / ''''''''''' \                       /   |
 |                / ::::::::::::: \                  =D-'    |
 |               (_________________)                         |
  \_________________________________________________________/
    """

# (lower bound, divisor, suffix), highest first.
_BYTE_MULTIPLES = (
    (1_000_000_000_000, 1_000_000_000_000, "T"),
    (1_000_000_000, 1_000_000_000, "G"),
    (1_000_000, 1_000_000, "M"),
    (1_000, 1_000, "K"),
)


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _format_one_decimal(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.1f}"


def get_percentage_string(observed: int, filtered: int) -> str:
    """Return the share of ``filtered`` over ``observed`` as a percentage string."""
    observed_float = _f32(float(observed))
    filtered_float = _f32(float(filtered))
    numerator = _f32(100.0 * filtered_float)
    if observed_float == 0:
        value = math.nan if numerator == 0 else math.inf
    else:
        value = _f32(numerator / observed_float)
    text = _format_one_decimal(value)
    if text == "0.0":
        return "<0.1%"
    return f"{text}%"


def get_formatted_bytes_string(bytes_count: int) -> str:
    """Return a quantity of bytes with its proper multiple (K, M, G, T)."""
    for lower_bound, divisor, suffix in _BYTE_MULTIPLES:
        if bytes_count >= lower_bound:
            n = _f32(_f32(float(bytes_count)) / divisor)
            return f"{_format_one_decimal(n)} {suffix}"
    return f"{bytes_count}  "


def get_report_path() -> Path:
    """Return where the traffic report file is written."""
    try:
        return Path(platformdirs.user_config_dir("sniffnet")) / "report.txt"
    except (OSError, KeyError, RuntimeError):
        return Path.home() / "sniffnet_report.txt"


def get_open_report_tooltip(language: Language) -> str:
    """Return the tooltip text for the "open report" button, centred above the report path."""
    label = open_report_translation(language)
    report_path = str(get_report_path())
    width = len(report_path.encode("utf-8"))
    padding = max(width - len(label), 0)
    left = padding // 2
    centred = " " * left + label + " " * (padding - left)
    return f"{centred}\n{report_path}"


def cli_welcome_message() -> str:
    """Return the banner printed on the terminal when the application starts."""
    return _WELCOME_BANNER.replace("{version}", APP_VERSION)


def print_cli_welcome_message() -> None:
    """Print the welcome banner."""
    print(cli_welcome_message(), end="")


def get_domain_from_r_dns(r_dns: str) -> str:
    """Return the last two labels of a reverse-DNS name, or the name itself if it is an address."""
    if not r_dns:
        return r_dns
    try:
        ipaddress.ip_address(r_dns)
    except ValueError:
        pass
    else:
        return r_dns
    parts = r_dns.split(".")
    if len(parts) >= 2:
        return ".".join(parts[-2:])
    return r_dns


def get_socket_address(address: str, port: int) -> str:
    """Join an address and a port, bracketing IPv6 addresses."""
    if ":" in address:
        return f"[{address}]:{port}"
    return f"{address}:{port}"