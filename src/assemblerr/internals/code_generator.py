class CodeGenerator:
    def __init__(self):
        self.lines = []

    def add(self, line):
        self.lines.append(line)

    def __str__(self):
        return '\n'.join(self.lines)
