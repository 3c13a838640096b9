from personinfo.models.person import Person

__all__ = ["Person"]
