# playarena/core/exceptions.py


class PlayArenaError(Exception):
    """Base de todos los errores de dominio."""


class NotFoundError(PlayArenaError):
    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} '{entity_id}' no encontrado")


class ResultIntegrityError(PlayArenaError):
    """
    El winnerId de un resultado no coincide con ninguno de los dos equipos
    del partido.
    """

    def __init__(self, match_id, winner_id, team1_id, team2_id):
        self.match_id = match_id
        self.winner_id = winner_id
        self.team1_id = team1_id
        self.team2_id = team2_id
        super().__init__(
            f"Partido {match_id}: winnerId '{winner_id}' no es participante "
            f"({team1_id} vs {team2_id})"
        )


class MatchAlreadyProcessedError(PlayArenaError):
    def __init__(self, match_id: str):
        self.match_id = match_id
        super().__init__(f"Partido {match_id} ya procesado")
