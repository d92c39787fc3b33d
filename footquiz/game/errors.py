class GameDataError(Exception):
    pass


class GameDataNotLoadedError(GameDataError):
    pass


class UnknownGameModeError(GameDataError):
    pass


class DuplicateQuestionIdError(GameDataError):
    pass


class InvalidQuestionRecordError(GameDataError):
    pass
