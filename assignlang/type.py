from enum import Enum, auto


class Type(Enum):
    ID = auto()
    INT = auto()
    OPERATOR = auto()
    SEMICOLON = ";"
    LRB = "("
    RRB = ")"
    END = "$"

    def __str__(self) -> str:
        match self:
            case Type.ID:
                return "identifier"
            case Type.INT:
                return "integer"
            case Type.OPERATOR:
                return "operator"
            case Type.END:
                return "end of program"
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.ID | Type.INT | Type.OPERATOR:
                return f"an {self}"
            case Type.END:
                return f"the {self}"
            case _:
                return f"a {self}"
