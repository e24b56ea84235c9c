import pytest

from crypmon import algos
from crypmon.exceptions import CrypmonError, IndexOutOfRange, RuleCountMismatch
from crypmon.utils import WILDCARD

def _test(sp, token, identifier, cts):
    return algos.test(algos.new_alarm_system(sp, token, identifier), cts)

def test_ciphertext_index(keys, cts):
    rg, agents = keys
    for agent,ct in zip(agents, cts):
        assert ct.index == agent.index
    assert cts[0].get_size() > 0

def test_encryption_is_randomised(keys):
    rg, agents = keys
    ct_a = algos.enc(agents[0], "X", 5)
    ct_b = algos.enc(agents[0], "X", 5)
    assert ct_a.part1 != ct_b.part1
    assert ct_a.part2 != ct_b.part2

def test_match(sp, keys, cts):
    rg, agents = keys
    token = algos.token_gen(rg, [5, 3, 7])
    assert token.indices == (0, 1, 2)
    assert _test(sp, token, "X", cts)

def test_one_rule_changed(sp, keys, cts):
    rg, agents = keys
    token = algos.token_gen(rg, [5, 4, 7])
    assert not _test(sp, token, "X", cts)

@pytest.mark.parametrize("rules", [[4, 3, 7], [5, 3, 6], [0, 3, 7], [5, 3, 15]])
def test_any_mismatch_fails(sp, keys, cts, rules):
    rg, agents = keys
    assert not _test(sp, algos.token_gen(rg, rules), "X", cts)

def test_other_identifier(sp, keys, cts):
    rg, agents = keys
    token = algos.token_gen(rg, [5, 3, 7])
    assert not _test(sp, token, "Y", cts)

def test_ciphertexts_for_different_identifiers(sp, keys):
    rg, agents = keys
    mixed = [algos.enc(agents[0], "X", 5), algos.enc(agents[1], "Y", 3), algos.enc(agents[2], "X", 7)]
    token = algos.token_gen(rg, [5, 3, 7])
    assert not _test(sp, token, "X", mixed)
    assert not _test(sp, token, "Y", mixed)

def test_wildcard(sp):
    # 99 needs 7 bits
    rg, agents = algos.gen(sp, 3, 8)
    token = algos.token_gen(rg, [5, -1, 7])
    assert token.indices == (0, 2)
    alarm = algos.new_alarm_system(sp, token, "X")
    for status in [3, 99]:
        cts = [agents[0].encrypt("X", 5), agents[1].encrypt("X", status), agents[2].encrypt("X", 7)]
        assert alarm.test(cts)

def test_wildcard_does_not_hide_mismatch(sp, keys, cts):
    rg, agents = keys
    assert not _test(sp, algos.token_gen(rg, [5, WILDCARD, 6]), "X", cts)

def test_all_wildcards(sp, keys, cts):
    rg, agents = keys
    token = rg.new_token([-1, -1, -1])
    assert token.indices == ()
    assert _test(sp, token, "X", cts)
    assert _test(sp, token, "X", [])

def test_token_is_randomised(keys):
    rg, agents = keys
    t1 = algos.token_gen(rg, [5, 3, 7])
    t2 = algos.token_gen(rg, [5, 3, 7])
    assert t1.product != t2.product
    assert t1.get_size() == t2.get_size()

def test_too_few_rules(keys):
    rg, agents = keys
    with pytest.raises(RuleCountMismatch):
        algos.token_gen(rg, [5, 3])
    with pytest.raises(ValueError):
        rg.new_token([])

def test_extra_rules(sp, keys, cts):
    rg, agents = keys
    # trailing wildcards are harmless, constraints on unknown agents are not
    assert _test(sp, algos.token_gen(rg, [5, 3, 7, -1]), "X", cts)
    with pytest.raises(RuleCountMismatch):
        algos.token_gen(rg, [5, 3, 7, 1])

def test_rule_wider_than_message_space(keys):
    rg, agents = keys
    with pytest.raises(ValueError):
        algos.token_gen(rg, [5, 3, 16])

def test_missing_ciphertext(sp, keys, cts):
    rg, agents = keys
    alarm = algos.new_alarm_system(sp, algos.token_gen(rg, [5, 3, 7]), "X")
    with pytest.raises(IndexOutOfRange):
        alarm.test(cts[:2])
    with pytest.raises(CrypmonError):
        alarm.test([])

def test_missing_ciphertext_at_wildcard(sp, keys, cts):
    rg, agents = keys
    alarm = algos.new_alarm_system(sp, algos.token_gen(rg, [5, 3, -1]), "X")
    assert alarm.test(cts[:2])

def test_invalid_plaintext(keys):
    rg, agents = keys
    with pytest.raises(ValueError):
        algos.enc(agents[0], "X", -3)
    with pytest.raises(ValueError):
        algos.enc(agents[0], "X", 16)

def test_independent_setups(keys, cts):
    # ciphertexts only match tokens from the same key generation
    sp2 = algos.setup()
    rg2, agents2 = algos.gen(sp2, 3, 4)
    token = algos.token_gen(rg2, [5, 3, 7])
    assert not _test(sp2, token, "X", cts)

def test_ciphertexts_by_agent_index(sp, keys, cts):
    rg, agents = keys
    alarm = algos.new_alarm_system(sp, algos.token_gen(rg, [5, -1, 7]), "X")
    assert alarm.test({0: cts[0], 2: cts[2]})
    with pytest.raises(IndexOutOfRange):
        alarm.test({0: cts[0], 1: cts[1]})
