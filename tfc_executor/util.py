import inflection


class InflectionStr(str):
    """A str whose attributes are the `inflection` helpers, so that
    `InflectionStr("ssh_keys").dasherize.singularize` == "ssh-key"
    """

    def __getattr__(self, name):
        inflection_method = getattr(inflection, name, None)
        if callable(inflection_method):
            return InflectionStr(inflection_method(self))
        raise AttributeError(name)
