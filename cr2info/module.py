modules = []


def register(cls):
    modules.append(cls)
    return cls


class FormatModule(object):

    def __init__(self, buf, options=None):
        self.buf = buf
        self.options = options or {}

    def identify(buf):
        return False

    def chew(self):
        return {}
