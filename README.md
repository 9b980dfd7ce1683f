# sniffnet

Building blocks for a network traffic monitor: localized interface text in
sixteen languages, human-readable formatting of traffic figures, and a check
for newer application releases.

## Languages

`sniffnet.language.Language` enumerates the supported languages (`EN`, `IT`,
`FR`, `ES`, `PL`, `DE`, `UK`, `ZH`, `RO`, `KO`, `PT`, `TR`, `RU`, `EL`, `FA`,
`SV`). English is the default. `LANGUAGE_ROWS` in the same module gives the
layout of a language picker: four rows of four languages.

```python
from sniffnet.language import Language

Language.default()            # Language.EN
Language.IT.radio_label()     # "Italiano"
```

## Translations

Every piece of interface text is a function that takes a `Language` and
returns a string. They are grouped by the part of the interface they belong to:

- `sniffnet.translations.messages`: status and error messages shown while
  traffic is observed, filtered packets and bytes, share of the total
- `sniffnet.translations.overview`: the overview page, report sorting, themes
  and settings tabs
- `sniffnet.translations.notifications`: notification settings and the
  notifications log
- `sniffnet.translations.connections`: connection details, hosts and search
  results; languages without a text of their own get the English one

```python
from sniffnet.language import Language
from sniffnet.translations.messages import of_total_translation
from sniffnet.translations.overview import incoming_translation
from sniffnet.translations.connections import showing_results_translation

incoming_translation(Language.IT)                   # "In entrata"
of_total_translation(Language.EN, "42.0%")          # "(42.0% of the total)"
showing_results_translation(Language.EN, 1, 20, 57) # "Showing 1-20 of 57 total results"
```

Functions that take extra values, such as `waiting_translation(language, adapter)`
or `packets_exceeded_value_translation(language, value)`, fill them into the
translated text. `packets_exceeded_value_translation` uses a singular form for
a single packet in the languages that have one, and
`bytes_exceeded_value_translation` trims the value it is given.

## Formatting traffic figures

```python
from sniffnet.formatted_strings import (
    get_domain_from_r_dns,
    get_formatted_bytes_string,
    get_percentage_string,
    get_socket_address,
)

get_formatted_bytes_string(1500)          # "1.5 K"
get_percentage_string(1000, 250)          # "25.0%"
get_socket_address("::1", 443)            # "[::1]:443"
get_domain_from_r_dns("a.b.example.com")  # "example.com"
```

`get_percentage_string` returns `"<0.1%"` for shares that round to zero.
`get_report_path()` gives the location of the traffic report file (in the
user's configuration directory), and `get_open_report_tooltip(language)` the
tooltip shown next to it. `print_cli_welcome_message()` prints the banner shown
at start-up; `cli_welcome_message()` returns it as a string. `APP_VERSION`
holds the application version used in the banner and in update checks.

## Checking for updates

`sniffnet.updates.is_newer_release_available(max_retries, seconds_between_retries)`
asks the release service for the latest release and tells whether it is newer
than `APP_VERSION`, retrying failed requests. Failures raise
`sniffnet.updates.UpdateCheckError`. `parse_release_name(name)` validates a
release name of the form `v1.2.3` and compares it with the installed version;
`check_for_updates()` runs the check with six attempts thirty seconds apart.

`sniffnet.web_page.WebPage` names the pages the application can link to; each
member's `url()` gives its address.

## What this package does not do

It captures no packets, writes no traffic report, and has no graphical
interface or command to run; it provides the text, formatting and update check
that such a program needs. The texts of the initial setup page (adapter and
filter selection, start button, quit and clear dialogs) are not included.