"""Multi-client predicate-only encryption for conjunctive equality tests, based on
[KPEJ17].

Notes
-----
Agents each encrypt a small non-negative status for a shared identifier. A
rule generator turns a conjunction of expected statuses (with wildcards) into
a token, and an alarm system learns only whether a set of ciphertexts for one
identifier satisfies the token. Variable names follow the notation of the
paper where possible.

References
----------
[KPEJ17] T. van de Kamp, A. Peter, M. H. Everts, W. Jonker. Multi-client Predicate-only
Encryption for Conjunctive Equality Tests. CANS 2017.

[NR04] M. Naor, O. Reingold. Number-theoretic constructions of efficient
pseudo-random functions. J. ACM 51(2), 2004.

Examples
--------
Set up system parameters and keys for 3 agents with 4-bit statuses:

>>> from crypmon import algos
>>> sp = algos.setup()
>>> rg, agents = algos.gen(sp, 3, 4)

Every agent encrypts its status for identifier "X":

>>> cts = [algos.enc(a, "X", m) for a,m in zip(agents, [5, 3, 7])]

Issue a token for "agent 0 is 5 and agent 2 is 7" (agent 1 is a wildcard):

>>> token = algos.token_gen(rg, [5, -1, 7])

Test the ciphertexts:

>>> alarm = algos.new_alarm_system(sp, token, "X")
>>> algos.test(alarm, cts)
True
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
