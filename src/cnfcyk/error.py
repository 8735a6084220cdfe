import sys

class Raise():
    @classmethod
    def error(cls, msg):
        print("Error:", msg, file=sys.stderr)
        sys.exit(1)
