"""
module responsible for small utility functions and constants used throughout the chimannot package
"""
import argparse
import os


PROGNAME = 'chimannot'
EXIT_OK = 0


def cast_boolean(input_value):
    value = str(input_value).lower()
    if value in ['t', 'true', '1', 'y', 'yes', '+']:
        return True
    elif value in ['f', 'false', '0', 'n', 'no', '-']:
        return False
    raise TypeError('casting to boolean failed', input_value)


class ChimNamespace:
    """
    Namespace to hold module constants

    Example:
        >>> nspace = ChimNamespace(thing=1, otherthing=2)
        >>> nspace.thing
        1
        >>> nspace.otherthing
        2
    """
    def __init__(self, *pos, **kwargs):
        object.__setattr__(self, '_defns', {})
        object.__setattr__(self, '_types', {})
        object.__setattr__(self, '_members', {})
        object.__setattr__(self, '_env_overwritable', set())
        object.__setattr__(self, '_env_prefix', PROGNAME.upper())

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

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, ', '.join(sorted(['{}={}'.format(k, repr(v)) for k, v in self.items()])))

    def get_env_name(self, attr):
        """
        Get the name of the corresponding environment variable

        Example:
            >>> nspace = ChimNamespace(a=1)
            >>> nspace.get_env_name('a')
            'CHIMANNOT_A'
        """
        if self._env_prefix:
            return '{}_{}'.format(self._env_prefix, attr).upper()
        return attr.upper()

    def get_env_var(self, attr):
        """
        retrieve the environment variable definition of a given attribute
        """
        env_name = self.get_env_name(attr)
        env = os.environ[env_name].strip()
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
            >>> ChimNamespace(thing=1, otherthing=2).items()
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

    def discard(self, attr):
        """
        Remove a variable if it exists
        """
        self._members.pop(attr, None)
        self._defns.pop(attr, None)
        self._types.pop(attr, None)
        self._env_overwritable.discard(attr)

    def get(self, key, *pos):
        """
        get an attribute, return a default (if given) if the attribute does not exist

        Example:
            >>> nspace = ChimNamespace(thing=1, otherthing=2)
            >>> nspace.get('thing', 2)
            1
            >>> nspace.get('nonexistant_thing', 2)
            2
        """
        if len(pos) > 1:
            raise TypeError('too many arguments. get takes a single \'default\' value argument')
        try:
            return self[key]
        except AttributeError as err:
            if pos:
                return pos[0]
            raise err

    def keys(self):
        return [k for k in self._members]

    def values(self):
        return [self[k] for k in self._members]

    def enforce(self, value):
        """
        checks that the current namespace has a given value

        Returns:
            the input value

        Raises:
            KeyError: the value did not exist

        Example:
            >>> nspace = ChimNamespace(thing=1, otherthing=2)
            >>> nspace.enforce(1)
            1
            >>> nspace.enforce(3)
            Traceback (most recent call last):
            ....
        """
        if value not in self.values():
            raise KeyError('value {0} is not a valid member of '.format(repr(value)), self.values())
        return value

    def __iter__(self):
        return iter(self.keys())

    def _set_type(self, attr, cast_type):
        if cast_type == bool:
            self._types[attr] = cast_boolean
        else:
            self._types[attr] = cast_type

    def type(self, attr, *pos):
        """
        returns the type

        Example:
            >>> nspace = ChimNamespace(thing=1, otherthing=2)
            >>> nspace.type('thing')
            <class 'int'>
        """
        if len(pos) > 1:
            raise TypeError('too many arguments. type takes a single \'default\' value argument')
        try:
            return self._types[attr]
        except KeyError as err:
            if pos:
                return pos[0]
            raise err

    def define(self, attr, *pos):
        """
        Get the definition of a given attribute or return a default (when given) if the attribute does not exist

        Raises:
            KeyError: the attribute does not exist and a default was not given
        """
        if len(pos) > 1:
            raise TypeError('too many arguments. define takes a single \'default\' value argument')
        try:
            return self._defns[attr]
        except KeyError as err:
            if pos:
                return pos[0]
            raise err

    def add(self, attr, value, defn=None, cast_type=None, env_overwritable=False):
        """
        Add an attribute to the name space

        Args:
            attr (str): name of the attribute being added
            value: the value of the attribute
            defn (str): the definition, will be used in generating the help menus
            cast_type (callable): the function to use in casting the value
            env_overwritable (bool): True if this attribute will be overriden by its environment variable equivalent

        Example:
            >>> nspace = ChimNamespace()
            >>> nspace.add('min_per_id', 80.0, defn='minimum percent identity', cast_type=float_percent)
        """
        if cast_type:
            self._set_type(attr, cast_type)
        else:
            self._set_type(attr, type(value))
        if defn:
            self._defns[attr] = defn

        if env_overwritable:
            self._env_overwritable.add(attr)
        self[attr] = value


def float_percent(num):
    """
    cast input to a float percentage. Identity values are on a 0-100 scale so anything
    at or below 1 is assumed to be a fraction given by mistake and is rejected

    Args:
        num: input to cast

    Returns:
        float

    Raises:
        argparse.ArgumentTypeError: if the input cannot be cast to a float or the number is not in (1, 100]
    """
    try:
        num = float(num)
    except ValueError:
        raise argparse.ArgumentTypeError('Must be a percentage greater than 1 and at most 100')
    if num <= 1 or num > 100:
        raise argparse.ArgumentTypeError('Must be a percentage greater than 1 and at most 100')
    return num


STRAND = ChimNamespace(POS='+', NEG='-')
""":class:`ChimNamespace`: holds controlled vocabulary for allowed strand values

- ``POS``: the positive/forward strand
- ``NEG``: the negative/reverse strand
"""

SIDE = ChimNamespace(LEFT='left', RIGHT='right')
""":class:`ChimNamespace`: which end of an adjacent alignment pair is being evaluated

- ``LEFT``: the upstream alignment (wrt the query transcript coordinates), its 3' end is the breakpoint
- ``RIGHT``: the downstream alignment, its 5' end is the breakpoint
"""

SENSE = ChimNamespace(SENSE='sense', ANTISENSE='antisense')
""":class:`ChimNamespace`: orientation of an alignment relative to the annotated gene it overlaps"""

COLUMNS = ChimNamespace(
    transcript='#transcript',
    num_alignments='num_alignments',
    align_descr='align_descr(s)',
    chim_annot_mapping='[chim_annot_mapping]'
)
""":class:`ChimNamespace`: column names of the tab-delimited fusion report

- ``transcript``: the query (target) transcript id
- ``num_alignments``: the number of alignment spans retained for the transcript
- ``align_descr``: the pair of alignment descriptors supporting the call
- ``chim_annot_mapping``: the junction mapping of each side and the gene pair label
"""

GTF_EXON_FEATURE = 'exon'
