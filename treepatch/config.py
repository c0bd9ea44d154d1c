import os

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_BASENAME = 'treepatch_config'


def config_path():
    """Directories searched for config files, in descending priority order."""
    return [os.getcwd(), os.path.join(os.path.expanduser('~'), '.treepatch')]


class TreepatchConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path):
    """Yield the json config found in each directory of path.

    path is in descending priority order, so configs come out
    lowest priority first, ready to be merged in turn.
    """
    for directory in reversed(path):
        loader = JSONFileConfigLoader(basefilename + '.json', path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        if config:
            yield config


def merge_config(target, new):
    """Merge the nested dict new into target, in place.

    A null value drops the key, restoring the built-in default.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            merge_config(target.setdefault(key, {}), value)
        elif value is None:
            target.pop(key, None)
        else:
            target[key] = value


def build_config(entrypoint):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('No config for entrypoint %r, expected one of %s.' % (
            entrypoint, ', '.join(sorted(entrypoint_configurables))))

    disk_config = {}
    for c in _load_config_files(CONFIG_BASENAME, path=config_path()):
        merge_config(disk_config, c)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, TreepatchConfigurable):
            merge_config(config, config_instance(c).configured_traits(c))
            if (c.__name__ in disk_config):
                merge_config(config, disk_config[c.__name__])

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(TreepatchConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Output(TreepatchConfigurable):

    indent = Integer(
        2,
        help="indentation of JSON written to files or the terminal.",
    ).tag(config=True)


class Diff(_Output):

    lowercase_paths = Bool(
        True,
        help="lower-case all paths of the computed patch.",
    ).tag(config=True)

    use_color = Bool(
        True,
        help="use ANSI color code escapes when printing patches.",
    ).tag(config=True)


class Apply(_Output):
    pass


class TreeDiff(Global, Diff):
    pass


class TreeApply(Global, Apply):
    pass


entrypoint_configurables = {
    'treediff': TreeDiff,
    'treeapply': TreeApply,
}
