"""Shared fixtures: a trimmed copy of the Public Suffix List.

SAMPLE_PSL keeps the real list's layout (comments, section markers) and
only the rules the tests exercise.
"""

from __future__ import annotations

import pytest

from suffixdex.extract.extractor import Extractor
from suffixdex.matching.trie import RuleTrie
from suffixdex.rules.parser import parse_rules

SAMPLE_PSL = """\
// This Source Code Form is subject to the terms of the Mozilla Public
// License, v. 2.0.

// ===BEGIN ICANN DOMAINS===

// ac : https://en.wikipedia.org/wiki/.ac
ac
com.ac

// au : https://en.wikipedia.org/wiki/.au
au
com.au
edu.au
act.edu.au

// ca : https://en.wikipedia.org/wiki/.ca
ca
ab.ca

// ck : https://en.wikipedia.org/wiki/.ck
*.ck
!www.ck

// cn : https://en.wikipedia.org/wiki/.cn
cn
com.cn
net.cn
// xn--fiqs8s ("Zhongguo/China", Chinese, Simplified)
中国

com
coop
edu
info
io
net
org

// ir : http://www.nic.ir/
ir
ac.ir
co.ir

// jp : https://en.wikipedia.org/wiki/.jp
jp
ac.jp
kyoto.jp
ide.kyoto.jp
*.kawasaki.jp
!city.kawasaki.jp

// uk : https://en.wikipedia.org/wiki/.uk
uk
ac.uk
co.uk

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

// Amazon Elastic Compute Cloud
*.compute.amazonaws.com

// Blogger
blogspot.ca
blogspot.com

// EU.org : https://eu.org/
eu.org

// GitHub
github.io

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture(scope="session")
def sample_trie() -> RuleTrie:
    return RuleTrie.from_rules(parse_rules(SAMPLE_PSL))


@pytest.fixture(scope="session")
def extractor(sample_trie) -> Extractor:
    return Extractor(sample_trie)


@pytest.fixture(scope="session")
def private_extractor(sample_trie) -> Extractor:
    return Extractor(sample_trie, include_private=True)
