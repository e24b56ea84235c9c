#!/usr/bin/env python3

"""Objects to represent system parameters, keys, ciphertexts and rule tokens.
"""

from crypmon.groups import Group,PairingGroup

class SystemParameters:
    """System parameters over the BLS12-381 curve (asymmetric pairing).

    Dependencies
    ------------
    * petrelic (through `PairingGroup`)

    Attributes
    ----------
    g1 : element of G1
        generator of G1
    g2 : element of G2
        generator of G2
    group : PairingGroup
        pairing context every algorithm uses for group arithmetic
    """

    def __init__(self,group=None,g1=None,g2=None):
        """
        Bind generators to a pairing context.

        If `g1` or `g2` are given as None, choose them at random.

        Parameters
        ----------
        group : PairingGroup, optional
            pairing context (a new one if `None`)
        g1 : element of G1, optional
            generator of G1
        g2 : element of G2, optional
            generator of G2
        """
        self.group = PairingGroup() if group is None else group
        self.g1 = self.group.random(Group.G1) if g1 is None else g1
        self.g2 = self.group.random(Group.G2) if g2 is None else g2

    @classmethod
    def load_from_file(cls, filename):
        """Load system parameters from a file.

        The storage format has not been defined yet, so this always fails.

        Raises
        ------
        NotImplementedError
        """
        raise NotImplementedError("loading system parameters from {!r} is not implemented".format(filename))

    def get_size(self):
        """Calculate the size (in bytes) of the generators."""
        return len(self.group.serialize(self.g1)) + len(self.group.serialize(self.g2))

class SetupKey:
    """Everything needed to generate key material for the agents and the rule generator.

    Private key material is handed to the agents and not kept here.

    Attributes
    ----------
    sp : SystemParameters
    """
    def __init__(self,sp):
        self.sp = sp

    def generate_keys(self, n, message_space_bits):
        """Generate a rule generator and `n` agents, see `algos.generate_keys`."""
        from crypmon import algos
        return algos.generate_keys(self, n, message_space_bits)

class AgentInfo:
    """What the rule generator knows about an agent.

    `beta` is the very same tuple the agent holds; it is not re-randomised.
    """
    def __init__(self,g2alpha,beta,g2gamma):
        self.g2alpha = g2alpha
        self.beta = beta
        self.g2gamma = g2gamma

class Agent:
    """An agent in the system, able to encrypt its status for an identifier.

    Attributes
    ----------
    index : int
        position of the agent (0 to n-1)
    g1alpha : element of G1
        `g1**alpha`
    beta : tuple of elements of ZR
        PRF key, length is the message space bit width
    gamma : element of ZR
    sp : SystemParameters
    """
    def __init__(self,index,g1alpha,beta,gamma,sp):
        self.index = index
        self.g1alpha = g1alpha
        self.beta = beta
        self.gamma = gamma
        self.sp = sp

    @property
    def message_space_bits(self):
        return len(self.beta)

    def encrypt(self, identifier, plaintext):
        """Encrypt `plaintext` for `identifier`, see `algos.enc`."""
        from crypmon import algos
        return algos.enc(self, identifier, plaintext)

class Ciphertext:
    """Ciphertext generated by an agent.

    Parameters
    ----------
    index : int
        index of the agent that generated it
    part1 : element of G1
        `g1**r`
    part2 : element of G1
        `F(g1**alpha, beta, r, x) * H(ID)**gamma`
    """
    def __init__(self,index,part1,part2):
        """Construct ciphertext object from tuple of elements."""
        self.index = index
        self.part1 = part1
        self.part2 = part2

    def get_size(self):
        """Calculate the size (in bytes) of the ciphertext."""
        ct_size = 0
        ct_size = ct_size + len(self.part1.to_binary())
        ct_size = ct_size + len(self.part2.to_binary())
        return ct_size

class RuleGenerator:
    """Generates rule tokens over the statuses of the agents it knows about.

    Attributes
    ----------
    agents : tuple of AgentInfo
        public information, in agent index order
    sp : SystemParameters
    """
    def __init__(self,agents,sp):
        self.agents = tuple(agents)
        self.sp = sp

    def new_token(self, rules):
        """Generate a rule token, see `algos.token_gen`."""
        from crypmon import algos
        return algos.token_gen(self, rules)

class RuleToken:
    """Encrypted rule (= token) defined over the statuses of a set of agents.

    Attributes
    ----------
    indices : tuple of int
        agents the rule constrains (wildcard positions are left out)
    g2u : tuple of elements of G2
        `g2**u_i` for every index
    f2u : tuple of elements of G2
        `F(g2**alpha_i, beta_i, u_i, y_i)` for every index
    product : element of G2
        `prod_i (g2**gamma_i)**u_i`
    """
    def __init__(self,indices,g2u,f2u,product):
        self.indices = tuple(indices)
        self.g2u = tuple(g2u)
        self.f2u = tuple(f2u)
        self.product = product

    def get_size(self):
        """Calculate the size (in bytes) of the group elements in the token."""
        token_size = len(self.product.to_binary())
        for i in range(len(self.indices)):
            token_size = token_size + len(self.g2u[i].to_binary())
            token_size = token_size + len(self.f2u[i].to_binary())
        return token_size

class AlarmSystem:
    """Tests whether ciphertexts match a token, without learning the rule or the statuses.

    Attributes
    ----------
    sp : SystemParameters
    token : RuleToken
    h_id : element of G1
        hash of the identifier the ciphertexts must belong to
    """
    def __init__(self,sp,token,h_id):
        self.sp = sp
        self.token = token
        self.h_id = h_id

    def test(self, ciphertexts):
        """Test `ciphertexts` against the token, see `algos.test`."""
        from crypmon import algos
        return algos.test(self, ciphertexts)
