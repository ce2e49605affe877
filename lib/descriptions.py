# Building and reading the character descriptions table
#
# mathml.descriptions.txt maps a character (or character sequence) to a
# readable name, one per line:
#   2220=angle
#   1d49c,302=...
#   #2220=angle      (duplicate key, ignored by readers)

import sys
import os
import re
import logging

from collections import namedtuple

current = os.path.dirname(os.path.realpath(__file__))
parent = os.path.dirname(current)
sys.path.append(parent)

from lib.dtd import decode_value

HEADER = "# Automatically generated. Do not edit; use override.descriptions.txt instead.\n"

ResolvedEntry = namedtuple('ResolvedEntry', ['name', 'code_key', 'description'])

# Applied in order, each to the output of the previous one
REWRITE_RULES = [
    # Source citations: "/downdownarrows A: down arrows", "/ISOAMSA dbl arr dn"
    (r'^/[^:=-]+[:=-]\s*', ''),
    (r'^/[^:= -]+ \s*', ''),

    # Abbreviations
    (r'\bdbl\b', 'double'),
    (r'\bdn\b', 'down'),
    (r'\brt\b', 'right'),
    (r'\bl&r\b', 'left and right'),
    (r'\barr\b', 'arrow'),
    (r'\bharp\b', 'harpoon'),
    (r' & ', ' and '),
    (r'\bNW\b', 'northwest'),
    (r'\bNE\b', 'northeast'),
    (r'\bSW\b', 'southwest'),
    (r'\bSE\b', 'southeast'),
    (r'\bgt-or-eq\b', 'greater-than-or-equal'),
    (r'\bless-or-eq\b', 'less-than-or-equal'),
    (r'\bgtr\b', 'greater'),
    (r'\beq\b', 'equal'),

    (r', Greek$', ''),
    (r'^=', ''),
]

REWRITE_REGEX = [(re.compile(pattern), replacement) for (pattern, replacement) in REWRITE_RULES]

# "alias ISOAMSO ang", "alias &foo; bar", "ISOTECH ap"
ALIAS_REGEX = re.compile(r'^(?:alias\s+(?:ISO[A-Z]+\s+)?|ISO[A-Z]+\s+)([^ ]+)')

HEX_REF_REGEX = re.compile(r'&#x([A-Za-z0-9]*);')

def code_key(decoded):
    m = HEX_REF_REGEX.fullmatch(decoded)
    if m:
        return m.group(1).lower().lstrip('0')

    return ','.join(format(ord(ch), 'x') for ch in decoded)

def clean_description(comment):
    desc = comment.strip()
    for regex, replacement in REWRITE_REGEX:
        desc = regex.sub(replacement, desc)

    return desc

def alias_reference(desc):
    """The entity name an alias description points at, or None."""
    m = ALIAS_REGEX.match(desc)
    if not m:
        return None

    ref = m.group(1)
    unwrapped = re.fullmatch(r'&(.*);', ref)
    if unwrapped:
        ref = unwrapped.group(1)

    return ref

def build_entries(merged):
    """ResolvedEntry per merged name -> RawEntityRecord, aliases not yet resolved."""
    return [ResolvedEntry(name, code_key(decode_value(record.value)), clean_description(record.comment))
                for name, record in merged.items()]

def resolve_aliases(entries):
    # Single hop: an alias always takes the cleaned text of its target,
    # even when the target is itself an alias
    cleaned = {entry.name: entry.description for entry in entries}

    resolved = []
    for entry in entries:
        ref = alias_reference(entry.description)

        if ref is not None:
            if ref in cleaned:
                entry = entry._replace(description=cleaned[ref])
            else:
                logging.debug(f"Unknown reference {ref} in {entry.name}: {entry.description}")

        resolved.append(entry)

    return resolved

def format_table(entries):
    out = HEADER
    done = set()

    for entry in entries:
        line = f"{entry.code_key}={entry.description}\n"

        if entry.code_key in done:
            # Comment out duplicates
            logging.debug(f"Duplicate key {entry.code_key} for {entry.name}")
            line = '#' + line

        done.add(entry.code_key)
        out += line

    return out

def read_descriptions(files):
    """Reads description tables into one code key -> description dict.

    Later files override earlier ones (mathml.descriptions.txt, then
    override.descriptions.txt). Files that don't exist are skipped.
    """
    descriptions = {}

    for file in files:
        if not os.path.exists(file):
            logging.warning(f"Descriptions file {file} not found")
            continue

        with open(file, "r", encoding="utf8") as f:
            for line in f:
                line = line.rstrip('\n')
                if line.strip() == '' or line.startswith('#'):
                    continue

                if '=' not in line:
                    raise ValueError(f"Invalid line format (no equals): {line}")

                key, desc = line.split('=', 1)
                descriptions[key] = desc.strip()

    return descriptions

def longest_sequence(descriptions):
    """Most code points in any one key."""
    return max((key.count(',') + 1 for key in descriptions), default=0)
