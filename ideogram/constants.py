"""
controlled vocabularies and the fixed display tables used throughout the ideogram package
"""
import os

from .util import cast_boolean


class IdeogramNamespace:
    """
    Namespace to hold module constants

    Example:
        >>> nspace = IdeogramNamespace(thing=1, otherthing=2)
        >>> nspace.thing
        1
        >>> nspace.otherthing
        2
    """

    def __init__(self, *pos, **kwargs):
        object.__setattr__(self, '_types', {})
        object.__setattr__(self, '_members', {})
        object.__setattr__(self, '_env_overwritable', set())
        object.__setattr__(self, '_env_prefix', 'IDEOGRAM')

        for k in pos:
            if k in self._members:
                raise AttributeError('Cannot respecify existing attribute', k, self._members[k])
            self[k] = k

        for attr, val in kwargs.items():
            if attr in self._members:
                raise AttributeError('Cannot respecify existing attribute', attr, self._members[attr])
            self[attr] = val

        for attr, value in self._members.items():
            self._set_type(attr, type(value))

    def get_env_name(self, attr):
        """
        Get the name of the corresponding environment variable

        Example:
            >>> nspace = IdeogramNamespace(width=900)
            >>> nspace.get_env_name('width')
            'IDEOGRAM_WIDTH'
        """
        return '{}_{}'.format(self._env_prefix, attr).upper()

    def get_env_var(self, attr):
        """
        retrieve the environment variable definition of a given attribute, cast to the type of its default
        """
        env = os.environ[self.get_env_name(attr)].strip()
        return self._types.get(attr, str)(env)

    def is_env_overwritable(self, attr):
        """
        Returns:
            bool: True if the variable is overrided by specifying the environment variable equivalent
        """
        return attr in self._env_overwritable

    def __getattribute__(self, attr):
        try:
            return object.__getattribute__(self, attr)
        except AttributeError as err:
            variables = object.__getattribute__(self, '_members')
            if attr not in variables:
                raise err
            if self.is_env_overwritable(attr):
                try:
                    return self.get_env_var(attr)
                except KeyError:
                    pass
            return variables[attr]

    def items(self):
        """
        Example:
            >>> IdeogramNamespace(thing=1, otherthing=2).items()
            [('thing', 1), ('otherthing', 2)]
        """
        return [(k, self[k]) for k in self.keys()]

    def __getitem__(self, key):
        return getattr(self, key)

    def __setitem__(self, key, val):
        self.__setattr__(key, val)

    def __setattr__(self, attr, val):
        if attr.startswith('_'):
            raise ValueError('cannot set private', attr)
        object.__getattribute__(self, '_members')[attr] = val

    def __contains__(self, attr):
        return attr in self._members

    def keys(self):
        return [k for k in self._members]

    def values(self):
        """
        get the attribute values as a list

        Example:
            >>> IdeogramNamespace(thing=1, otherthing=2).values()
            [1, 2]
        """
        return [self[k] for k in self._members]

    def enforce(self, value):
        """
        checks that the current namespace has a given value

        Returns:
            the input value

        Raises:
            KeyError: the value did not exist

        Example:
            >>> REGION_TYPE.enforce('PAR')
            'PAR'
            >>> REGION_TYPE.enforce('Cytoband')
            Traceback (most recent call last):
            ....
        """
        if value not in self.values():
            raise KeyError('value {0} is not a valid member of '.format(repr(value)), self.values())
        return value

    def _set_type(self, attr, cast_type):
        if cast_type == bool:
            self._types[attr] = cast_boolean
        else:
            self._types[attr] = cast_type

    def add(self, attr, value, cast_type=None, env_overwritable=False):
        """
        Add an attribute to the name space

        Args:
            attr (str): name of the attribute being added
            value: the value of the attribute
            cast_type (callable): the function to use in casting the value
            env_overwritable (bool): True if this attribute will be overriden by its environment variable equivalent
        """
        if cast_type:
            self._set_type(attr, cast_type)
        else:
            self._set_type(attr, type(value))
        if env_overwritable:
            self._env_overwritable.add(attr)
        self[attr] = value

    def __call__(self, value):
        try:
            return self.enforce(value)
        except KeyError:
            raise TypeError('Invalid value {} for {}. Must be a valid member: {}'.format(
                repr(value), self.__class__.__name__, self.values()))


class WeakIdeogramNamespace(IdeogramNamespace):

    def is_env_overwritable(self, attr):
        return True


REGION_TYPE = IdeogramNamespace(
    PAR='PAR',
    X_DEGENERATE='XDegenerate',
    XTR='XTR',
    AMPLICONIC='Ampliconic',
    PALINDROME='Palindrome',
    HETEROCHROMATIN='Heterochromatin',
    CENTROMERE='Centromere',
    STR='STR'
)
""":class:`IdeogramNamespace`: holds controlled vocabulary for the structural classification of chromosome regions

- ``PAR``: pseudoautosomal region, recombines with X
- ``X_DEGENERATE``: stable single-copy regions
- ``XTR``: X-transposed region
- ``AMPLICONIC``: high copy number regions
- ``PALINDROME``: palindromic arms (P1-P8)
- ``HETEROCHROMATIN``: Yq12 satellite arrays
- ``CENTROMERE``: centromeric region
- ``STR``: short tandem repeat markers
"""

VARIANT_STATUS = IdeogramNamespace(
    CONFIRMED='CONFIRMED',
    NOVEL='NOVEL',
    CONFLICT='CONFLICT',
    PENDING='PENDING'
)
""":class:`IdeogramNamespace`: holds controlled vocabulary for the reconciliation status of a called variant

- ``CONFIRMED``: concordant across sources and present in the reference tree
- ``NOVEL``: high confidence but not in the reference tree (private)
- ``CONFLICT``: discordant calls across sources
- ``PENDING``: awaiting reconciliation
"""

CONSENSUS_STATE = IdeogramNamespace(
    DERIVED='DERIVED',
    ANCESTRAL='ANCESTRAL',
    HETEROPLASMY='HETEROPLASMY',
    NO_CALL='NO_CALL'
)
""":class:`IdeogramNamespace`: holds controlled vocabulary for the consensus allele state of a variant"""

CHM13_CHRY_LENGTH = 62460029
"""int: length of the CHM13v2.0 (T2T) Y chromosome, used when no length can be inferred from the regions"""

DEFAULT_REGION_COLOR = '#666666'
DEFAULT_VARIANT_COLOR = '#888888'

REGION_TYPE_LABEL = {
    REGION_TYPE.PAR: 'PAR',
    REGION_TYPE.X_DEGENERATE: 'X-degenerate',
    REGION_TYPE.XTR: 'XTR',
    REGION_TYPE.AMPLICONIC: 'Ampliconic',
    REGION_TYPE.PALINDROME: 'Palindrome',
    REGION_TYPE.HETEROCHROMATIN: 'Heterochromatin',
    REGION_TYPE.CENTROMERE: 'Centromere',
    REGION_TYPE.STR: 'STR'
}

REGION_COLOR = {
    REGION_TYPE.PAR: '#6B8E23',
    REGION_TYPE.X_DEGENERATE: '#228B22',
    REGION_TYPE.XTR: '#CD853F',
    REGION_TYPE.AMPLICONIC: '#DAA520',
    REGION_TYPE.PALINDROME: '#FF8C00',
    REGION_TYPE.HETEROCHROMATIN: '#4A4A4A',
    REGION_TYPE.CENTROMERE: '#696969',
    REGION_TYPE.STR: '#9370DB'
}

VARIANT_COLOR = {
    VARIANT_STATUS.CONFIRMED: '#4CAF50',
    VARIANT_STATUS.NOVEL: '#2196F3',
    VARIANT_STATUS.CONFLICT: '#F44336',
    VARIANT_STATUS.PENDING: '#FF9800'
}

# background types first so the more specific annotations are painted over them
REGION_LAYER_ORDER = (
    REGION_TYPE.X_DEGENERATE,
    REGION_TYPE.HETEROCHROMATIN,
    REGION_TYPE.CENTROMERE,
    REGION_TYPE.PAR,
    REGION_TYPE.XTR,
    REGION_TYPE.AMPLICONIC,
    REGION_TYPE.PALINDROME
)
REGION_LAYER_EXCLUDED = (REGION_TYPE.STR,)

REGION_LEGEND = (
    (REGION_TYPE.PAR, 'PAR'),
    (REGION_TYPE.X_DEGENERATE, 'X-deg'),
    (REGION_TYPE.XTR, 'XTR'),
    (REGION_TYPE.AMPLICONIC, 'Ampliconic'),
    (REGION_TYPE.PALINDROME, 'Palindrome'),
    (REGION_TYPE.HETEROCHROMATIN, 'Het')
)
REGION_LEGEND_EXCLUDED = (REGION_TYPE.CENTROMERE, REGION_TYPE.STR)

DRAWN_VARIANT_STATUS = (VARIANT_STATUS.CONFIRMED, VARIANT_STATUS.NOVEL, VARIANT_STATUS.CONFLICT)
DRAWN_VARIANT_STATUS_EXCLUDED = (VARIANT_STATUS.PENDING,)

VARIANT_LEGEND = (
    (VARIANT_STATUS.CONFIRMED, 'Confirmed'),
    (VARIANT_STATUS.NOVEL, 'Novel'),
    (VARIANT_STATUS.CONFLICT, 'Conflict')
)
VARIANT_LEGEND_EXCLUDED = (VARIANT_STATUS.PENDING,)


def check_vocabulary_coverage(nspace, covered, excluded=(), name='table'):
    """
    checks that every member of a controlled vocabulary is accounted for by a display table. A member
    must either be covered by the table or be listed as deliberately excluded from it

    Args:
        nspace (IdeogramNamespace): the vocabulary
        covered (Iterable): values the table handles
        excluded (Iterable): values the table deliberately leaves out
        name (str): name of the table, used in the error message

    Raises:
        KeyError: a member is not accounted for or the table refers to a value outside the vocabulary
    """
    covered = list(covered)
    accounted = set(covered) | set(excluded)
    missing = [value for value in nspace.values() if value not in accounted]
    if missing:
        raise KeyError('{} does not account for all vocabulary members'.format(name), missing)
    unknown = sorted(accounted - set(nspace.values()))
    if unknown:
        raise KeyError('{} refers to values outside the vocabulary'.format(name), unknown)
    if set(covered) & set(excluded):
        raise KeyError('{} both covers and excludes a value'.format(name), sorted(set(covered) & set(excluded)))


check_vocabulary_coverage(REGION_TYPE, REGION_TYPE_LABEL, name='REGION_TYPE_LABEL')
check_vocabulary_coverage(REGION_TYPE, REGION_COLOR, name='REGION_COLOR')
check_vocabulary_coverage(REGION_TYPE, REGION_LAYER_ORDER, REGION_LAYER_EXCLUDED, name='REGION_LAYER_ORDER')
check_vocabulary_coverage(
    REGION_TYPE, [rtype for rtype, _ in REGION_LEGEND], REGION_LEGEND_EXCLUDED, name='REGION_LEGEND')
check_vocabulary_coverage(VARIANT_STATUS, VARIANT_COLOR, name='VARIANT_COLOR')
check_vocabulary_coverage(
    VARIANT_STATUS, DRAWN_VARIANT_STATUS, DRAWN_VARIANT_STATUS_EXCLUDED, name='DRAWN_VARIANT_STATUS')
check_vocabulary_coverage(
    VARIANT_STATUS, [status for status, _ in VARIANT_LEGEND], VARIANT_LEGEND_EXCLUDED, name='VARIANT_LEGEND')


def region_color(region_type):
    """
    Returns:
        str: the fill color for a region type, neutral gray for anything outside the vocabulary
    """
    return REGION_COLOR.get(region_type, DEFAULT_REGION_COLOR)


def region_label(region_type):
    """
    Returns:
        str: the human readable label for a region type (the raw value if it is not part of the vocabulary)
    """
    return REGION_TYPE_LABEL.get(region_type, str(region_type))


def variant_color(status):
    return VARIANT_COLOR.get(status, DEFAULT_VARIANT_COLOR)
