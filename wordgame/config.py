from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='WORDGAME_')

    data_dir: Path = Path('data')
    words_file: str = 'words.dat'
    scores_file: str = 'scores.dat'
    seed_words: bool = True

    @property
    def words_path(self) -> Path:
        return self.data_dir / self.words_file

    @property
    def scores_path(self) -> Path:
        return self.data_dir / self.scores_file

storage = StorageConfig()

class ServerConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='WORDGAME_')

    host: str = '0.0.0.0'
    port: int = 8080
    log_level: str = 'INFO'
    cors_origins: List[str] = ['http://localhost:3000']
    default_leaderboard_limit: int = 10
    max_leaderboard_limit: int = 100

server = ServerConfig()
