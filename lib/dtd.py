# Reading the MathML DTD entity files (.ent)

import sys
import os
import re
import html
import logging
import requests

from collections import namedtuple
from pathlib import Path

current = os.path.dirname(os.path.realpath(__file__))
parent = os.path.dirname(current)
sys.path.append(parent)

from lib.utils import create_folders, read_file, read_yaml

class FetchError(Exception):
    pass

class MalformedEntityLine(Exception):

    def __init__(self, line):
        super().__init__(f"Invalid line {line}")
        self.line = line

# One input file; priority is its index in the configured list (0 wins)
EntitySource = namedtuple('EntitySource', ['path', 'priority'])

# One <!ENTITY name "value" ><!--comment--> declaration
RawEntityRecord = namedtuple('RawEntityRecord', ['name', 'value', 'comment'])

ENTITY_REGEX = re.compile(r'<!ENTITY\s+(\S+)\s+"([^"]+)"\s*>(?:<!--(.*?)-->)?')

# <!ENTITY % plane1D "&#38;#38;#x1D" > is a parameter entity used inside other values
PLANE1D_REGEX = re.compile(r'^<!ENTITY\s+%\s*plane1D')

def cache_path(path, cache_folder):
    return Path(cache_folder) / path

def fetch_source(path, base_url, cache_folder):
    """Returns the text of an entity file, downloading it into the cache on first use.

    A cached copy is never refreshed; delete it to download again.
    """
    target = cache_path(path, cache_folder)

    if os.path.exists(target):
        logging.debug(f"Reading {path} from {target}")
        return read_file(target)

    url = f"{base_url}{path}"
    logging.info(f"Downloading {url}")

    try:
        response = requests.get(url)
    except requests.RequestException as e:
        raise FetchError(f"Failed to download: {url} ({e})") from e

    if response.status_code != 200 or not response.content:
        raise FetchError(f"Failed to download: {url} (status {response.status_code})")

    # Only text that decodes is cached
    try:
        text = response.content.decode('utf-8')
    except UnicodeDecodeError as e:
        raise FetchError(f"Failed to download: {url} (not UTF-8: {e})") from e

    create_folders(target.parent)
    with open(target, 'wb') as f:
        f.write(response.content)

    return text

def load_sources(paths, base_url, cache_folder):
    """Yields (EntitySource, text) for each path, in priority order."""
    for priority, path in enumerate(paths):
        yield EntitySource(path, priority), fetch_source(path, base_url, cache_folder)

def parse_entities(text):
    """Parses the entity declarations in one .ent file, in file order.

    Raises MalformedEntityLine for a declaration that doesn't fit the
    one-line <!ENTITY name "value" ><!--comment--> form.
    """
    records = []

    for line in text.splitlines():
        line = line.rstrip()
        if line.strip() == '':
            continue

        if not line.startswith('<!ENTITY'):
            continue

        if PLANE1D_REGEX.match(line):
            continue

        m = ENTITY_REGEX.fullmatch(line)
        if not m:
            raise MalformedEntityLine(line)

        records.append(RawEntityRecord(m.group(1), m.group(2), m.group(3) or ''))

    return records

def decode_value(value):
    # Double-escaped so that the decode below leaves a literal &#x1D... behind
    value = value.strip().replace('%plane1D;', '&#38;#38;#x1D')
    value = html.unescape(value)
    return value.replace('&#38;', '&')

def merge_sources(sources):
    """Merges (EntitySource, records) pairs into one name -> record dict.

    Within a source a later declaration replaces an earlier one; across
    sources the first listed source keeps the name.
    """
    merged = {}

    for source, records in sources:
        declared = {}
        for record in records:
            declared[record.name] = record

        kept = 0
        for name, record in declared.items():
            if name in merged:
                continue
            merged[name] = record
            kept += 1

        logging.debug(f"{source.path}: {len(records)} declarations, {kept} new names")

    return merged

def load_entities(APP, list_name):
    """Fetches and parses every file in one list of the sources config, merged by priority."""
    paths = read_yaml(APP['dtd']['sources'])[list_name]

    parsed = []
    for source, text in load_sources(paths, APP['dtd']['base_url'], APP['dtd']['cache_folder']):
        parsed.append((source, parse_entities(text)))

    return merge_sources(parsed)
