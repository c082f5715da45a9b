from parameterizable import ParameterizableClass

from restrictedstr import PathStr, RestrictedStr


def test_restricted_str_is_parameterizable(abc):
    assert isinstance(abc, ParameterizableClass)
    assert issubclass(RestrictedStr.without(b"/"), ParameterizableClass)


def test_rebuild_from_params(abc):
    params = abc.get_params()
    assert list(params) == ["content"]
    rebuilt = PathStr(**params)
    assert rebuilt == abc
    assert rebuilt is not abc
