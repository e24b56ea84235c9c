#!/usr/bin/env python3

"""Implementation of the scheme algorithms (Setup, KeyGen, Enc, TokenGen, Test) and the PRF F.
"""

import logging
from crypmon.groups import Group,PairingGroup
from crypmon.objects import *
from crypmon.exceptions import RuleCountMismatch,IndexOutOfRange
from crypmon import utils

logger = logging.getLogger(__name__)

def prf(sp, group, base, beta, aux, x):
    """Pseudorandom function based on [NR04], mapping `x` to an element of G1 or G2.

    Computes `base ** (aux * prod_{i : x_i = 1} beta[i])`, where `x_i` is the
    i-th bit of `x` (least significant first).

    Parameters
    ----------
    sp : SystemParameters
        system parameters (for the pairing context)
    group : Group
        `Group.G1` or `Group.G2`, the group `base` lives in
    base : element of G1 or G2
    beta : sequence of elements of ZR
        PRF key, one scalar per bit of the message space
    aux : element of ZR
        extra factor in the exponent; saves one exponentiation in Enc and TokenGen
    x : int
        non-negative input

    Returns
    -------
    element of `group`

    Notes
    -----
    This is NOT a constant-time implementation: the number of scalar
    multiplications depends on the bits of `x`. Do not use it where timing
    side channels matter.
    """
    utils.check_non_negative("PRF input", x)
    if x.bit_length() > len(beta):
        raise ValueError("input {} does not fit in a {}-bit message space".format(x, len(beta)))

    br = sp.group.one()
    for i,bit in enumerate(utils.bits(x)):
        if bit == 1:
            br = sp.group.mul_scalar(br, beta[i])
    br = sp.group.mul_scalar(br, aux)

    return sp.group.exp(group, base, br)

def setup(group=None):
    """Generate system parameters over the BLS12-381 curve.

    Parameters
    ----------
    group : PairingGroup (optional)
        pairing context to bind the parameters to

    Returns
    -------
    sp : SystemParameters
        random generators of G1 and G2 together with the pairing context
    """
    sp = SystemParameters(PairingGroup() if group is None else group)
    logger.debug("generated new system parameters")
    return sp

def generate_keys(setup_key, n, message_space_bits):
    """Generate keys for the rule generator and `n` agents.

    Parameters
    ----------
    setup_key : SetupKey
        holds the system parameters the keys are generated for
    n : int
        number of agents
    message_space_bits : int
        bit width of the statuses the agents encrypt

    Returns
    -------
    rg : RuleGenerator
        holds the public info of all agents, in index order
    agents : list of Agent
        agent `i` at position `i`
    """
    utils.check_non_negative("number of agents", n)
    utils.check_non_negative("message space bit width", message_space_bits)
    sp = setup_key.sp
    group = sp.group

    agents = [None] * n
    infos = [None] * n
    for i in range(n):
        alpha = group.random_scalar()
        # shared as-is between the agent and the rule generator
        beta = tuple(group.random_scalar() for _ in range(message_space_bits))
        gamma = group.random_scalar()

        agents[i] = Agent(i, sp.g1 ** alpha, beta, gamma, sp)
        infos[i] = AgentInfo(sp.g2 ** alpha, beta, sp.g2 ** gamma)

    logger.debug("generated keys for %d agents (%d-bit message space)", n, message_space_bits)
    return RuleGenerator(infos, sp), agents

def gen(sp, n, message_space_bits=utils.DEFAULT_MESSAGE_SPACE_BITS):
    """Shortcut for `generate_keys(SetupKey(sp), n, message_space_bits)`."""
    return generate_keys(SetupKey(sp), n, message_space_bits)

def enc(agent, identifier, plaintext):
    """Encrypt an agent's status for an identifier.

    Parameters
    ----------
    agent : Agent
    identifier : str
        identifier shared by all agents (e.g. a name or a session)
    plaintext : int
        status, `0 <= plaintext < 2**agent.message_space_bits`

    Returns
    -------
    ct : Ciphertext
        `(g1**r, F(g1**alpha, beta, r, plaintext) * H(identifier)**gamma)`
    """
    utils.check_non_negative("plaintext", plaintext)
    sp = agent.sp
    h_id = sp.group.hash_to_g1(identifier)
    r = sp.group.random_scalar()

    ct1 = sp.g1 ** r
    ct2 = prf(sp, Group.G1, agent.g1alpha, agent.beta, r, plaintext) * (h_id ** agent.gamma)

    return Ciphertext(agent.index, ct1, ct2)

def token_gen(rg, rules):
    """Generate a new rule token.

    Parameters
    ----------
    rg : RuleGenerator
    rules : sequence of int
        expected status of agent `i` at position `i`; negative values are
        wildcards and put no constraint on that agent

    Returns
    -------
    token : RuleToken

    Raises
    ------
    RuleCountMismatch
        if there are fewer rules than agents, or a rule constrains an agent
        the rule generator does not know
    """
    if len(rules) < len(rg.agents):
        raise RuleCountMismatch("got {} rules for {} agents".format(len(rules), len(rg.agents)))
    group = rg.sp.group

    indices = []
    g2u = []
    f2u = []
    product = group.identity(Group.G2)
    for i,v in enumerate(rules):
        if utils.is_wildcard(v):
            continue
        if i >= len(rg.agents):
            raise RuleCountMismatch("rule {} refers to unknown agent {}".format(v, i))
        info = rg.agents[i]
        u = group.random_scalar()

        indices.append(i)
        g2u.append(rg.sp.g2 ** u)
        # note the order: u is the aux factor, v the PRF input
        f2u.append(prf(rg.sp, Group.G2, info.g2alpha, info.beta, u, v))
        product = product * (info.g2gamma ** u)

    logger.debug("generated token over agents %s (%d wildcards)", indices, len(rules)-len(indices))
    return RuleToken(indices, g2u, f2u, product)

def new_alarm_system(sp, token, identifier):
    """Create an alarm system testing `token` on ciphertexts for `identifier`."""
    return AlarmSystem(sp, token, sp.group.hash_to_g1(identifier))

def test(alarm, ciphertexts):
    """Test whether the ciphertexts match the alarm system's token.

    Checks `prod_i e(ct_i[0], f2u_i) * e(H(ID), product) == prod_i e(ct_i[1], g2u_i)`
    over the agents `i` in the token.

    Parameters
    ----------
    alarm : AlarmSystem
    ciphertexts : sequence or mapping of Ciphertext
        ciphertext of agent `i` at index (or key) `i`

    Returns
    -------
    bool
        True iff every constrained agent encrypted the expected status for the
        alarm system's identifier

    Raises
    ------
    IndexOutOfRange
        if the token constrains an agent with no ciphertext in `ciphertexts`
    """
    token = alarm.token
    group = alarm.sp.group

    parts1 = [None] * len(token.indices)
    parts2 = [None] * len(token.indices)
    for i,v in enumerate(token.indices):
        try:
            ct = ciphertexts[v]
        except (IndexError, KeyError):
            raise IndexOutOfRange("token refers to agent {} but no ciphertext was given for it".format(v)) from None
        parts1[i], parts2[i] = ct.part1, ct.part2

    p1 = group.pair_prod(parts1, token.f2u) * group.pair(alarm.h_id, token.product)
    p2 = group.pair_prod(parts2, token.g2u)
    result = p1 == p2
    logger.debug("tested %d ciphertexts against token: %s", len(token.indices), result)
    return result
