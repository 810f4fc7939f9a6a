
class Namespace(object):
    def __init__(self, **kwargs):
        self.__name__ = "unknown"
        for name, value in kwargs.items():
            setattr(self, name, value)

    def __repr__(self):
        attrs = ", ".join("%s=%r" % (k, v)
            for k, v in sorted(vars(self).items()) if k != "__name__")
        return "Namespace(%s)" % attrs

def char_reader(f, size=1024):
    # convert a file like object into a character generator
    buf = f.read(size)
    while buf:
        for c in buf:
            yield c
        buf = f.read(size)

def read_text(path):
    with open(path, "r") as src:
        return src.read()
