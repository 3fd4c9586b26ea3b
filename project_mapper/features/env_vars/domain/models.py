from dataclasses import dataclass

@dataclass(frozen=True)
class EnvVariable:
    """
    One documented variable from a .env.example style file.
    """
    name: str
    value: str = ""
    description: str = ""
