from typing import Iterable


MASK = "****"


class Chirp:
    """Сущность chirp'а"""
    
    def __init__(self, id: int, body: str):
        self.id = id
        self.body = body
    
    @staticmethod
    def clean_body(body: str, banned_words: Iterable[str]) -> str:
        """Замена запрещенных слов на маску без учета регистра"""
        banned = {word.lower() for word in banned_words}
        words = body.split(" ")
        
        for i, word in enumerate(words):
            if word.lower() in banned:
                words[i] = MASK
        
        return " ".join(words)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Chirp):
            return False
        return self.id == other.id and self.body == other.body
    
    def __repr__(self) -> str:
        return f"Chirp(id={self.id}, body={self.body!r})"
