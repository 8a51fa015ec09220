"""
Implementation SQLModel de IStorage.

Persiste le catalogue, les utilisateurs et les favoris dans SQLite.
Une session est ouverte par operation. L'ajout atomique d'un favori
s'appuie sur la contrainte d'unicite (user_id, content_id).
"""

import json
import uuid
from collections.abc import Generator, Iterable
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional, Union

from loguru import logger
from sqlalchemy import Engine, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from streamcat.core.entities.content import (
    Classification,
    Content,
    ContentType,
    MovieDetail,
    Person,
    SeriesDetail,
)
from streamcat.core.entities.user import User, UserListEntry
from streamcat.core.exceptions import (
    AlreadyInListError,
    ContentNotFoundError,
    DuplicateContentError,
    StorageError,
)
from streamcat.core.ports.storage import IStorage
from streamcat.infrastructure.persistence.models import (
    ContentModel,
    UserListModel,
    UserModel,
)


def _people_to_json(people: Iterable[Person]) -> str:
    return json.dumps([{"name": p.name, "photo": p.photo} for p in people])


def _people_from_json(raw: Optional[str]) -> tuple[Person, ...]:
    if not raw:
        return ()
    return tuple(Person(name=p["name"], photo=p["photo"]) for p in json.loads(raw))


class SQLModelStorage(IStorage):
    """
    Stockage SQLModel du catalogue et des favoris.

    Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel).
    Les erreurs SQLAlchemy inattendues sont journalisees et remontees en
    StorageError.
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialise le stockage avec un engine deja initialise (tables creees).

        Args:
            engine: Engine SQLAlchemy
        """
        self._engine = engine

    @contextmanager
    def _session(self) -> Generator[Session, None, None]:
        """Ouvre une session et traduit les erreurs techniques en StorageError."""
        with Session(self._engine) as session:
            try:
                yield session
            except IntegrityError:
                session.rollback()
                raise
            except SQLAlchemyError as e:
                session.rollback()
                logger.exception("Erreur du stockage SQL")
                raise StorageError(str(e)) from e

    # --- Conversions ---

    def _to_entity(self, model: ContentModel) -> Content:
        """Convertit un modele DB en entite domaine."""
        if model.type == ContentType.SERIES.value:
            detail = SeriesDetail(
                creator=model.creator,
                creator_image=model.creator_image,
                seasons=model.seasons,
                episodes=model.episodes,
            )
        else:
            detail = MovieDetail(
                directors=_people_from_json(model.directors_json),
                duration=model.duration,
            )
        return Content(
            id=model.id,
            title=model.title,
            year=model.year,
            rating=model.rating,
            genre=model.genre,
            classification=Classification.parse(model.classification),
            detail=detail,
            cast=_people_from_json(model.cast_json),
            description=model.description,
            full_description=model.full_description,
            poster=model.poster,
            backdrop=model.backdrop,
            embed=model.embed,
            featured=model.featured,
        )

    def _to_model(self, entity: Content, position: int) -> ContentModel:
        """Convertit une entite domaine en modele DB."""
        model = ContentModel(
            id=entity.id,
            position=position,
            type=entity.type.value,
            title=entity.title,
            year=entity.year,
            rating=entity.rating,
            genre=entity.genre,
            classification=entity.classification.value,
            cast_json=_people_to_json(entity.cast),
            description=entity.description,
            full_description=entity.full_description,
            poster=entity.poster,
            backdrop=entity.backdrop,
            embed=entity.embed,
            featured=entity.featured,
        )
        detail = entity.detail
        if isinstance(detail, MovieDetail):
            model.directors_json = _people_to_json(detail.directors)
            model.duration = detail.duration
        else:
            model.creator = detail.creator
            model.creator_image = detail.creator_image
            model.seasons = detail.seasons
            model.episodes = detail.episodes
        return model

    @staticmethod
    def _user_to_entity(model: UserModel) -> User:
        return User(id=model.id, username=model.username, password=model.password)

    @staticmethod
    def _entry_to_entity(model: UserListModel) -> UserListEntry:
        return UserListEntry(
            id=model.id,
            user_id=model.user_id,
            content_id=model.content_id,
            added_at=model.added_at,
        )

    def _select_content(self, *conditions) -> list[Content]:
        statement = select(ContentModel)
        for condition in conditions:
            statement = statement.where(condition)
        statement = statement.order_by(ContentModel.position)
        with self._session() as session:
            models = session.exec(statement).all()
            return [self._to_entity(model) for model in models]

    # --- Utilisateurs ---

    async def get_user(self, user_id: str) -> Optional[User]:
        """Recupere un utilisateur par son ID."""
        with self._session() as session:
            model = session.get(UserModel, user_id)
            return self._user_to_entity(model) if model else None

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Recupere un utilisateur par son nom exact."""
        statement = select(UserModel).where(UserModel.username == username)
        with self._session() as session:
            model = session.exec(statement).first()
            return self._user_to_entity(model) if model else None

    async def create_user(self, username: str, password: str) -> User:
        """Cree un utilisateur avec un UUID."""
        model = UserModel(id=str(uuid.uuid4()), username=username, password=password)
        with self._session() as session:
            session.add(model)
            session.commit()
            session.refresh(model)
            logger.info("Utilisateur cree", user_id=model.id, username=username)
            return self._user_to_entity(model)

    async def get_or_create_user(self, username: str, password: str) -> User:
        """Retourne l'utilisateur existant ou le cree (nom unique en base)."""
        user = await self.get_user_by_username(username)
        if user is not None:
            return user
        try:
            return await self.create_user(username, password)
        except IntegrityError:
            # Creation concurrente : l'autre insertion a gagne
            user = await self.get_user_by_username(username)
            if user is None:
                raise
            return user

    # --- Catalogue ---

    async def load_catalog(self, contents: Iterable[Content]) -> int:
        """Insere les contenus a la suite du catalogue existant."""
        count = 0
        with self._session() as session:
            position = session.exec(
                select(func.coalesce(func.max(ContentModel.position), 0))
            ).one()
            for content in contents:
                if session.get(ContentModel, content.id) is not None:
                    session.rollback()
                    raise DuplicateContentError(content.id)
                position += 1
                session.add(self._to_model(content, position))
                # Flush pour detecter un doublon dans le meme lot
                session.flush()
                count += 1
            session.commit()
        logger.debug("Catalogue charge en base", count=count)
        return count

    async def get_all_content(self) -> list[Content]:
        """Retourne tout le catalogue, trie par position."""
        return self._select_content()

    async def get_content_by_id(self, content_id: str) -> Optional[Content]:
        """Recupere un contenu par son ID."""
        with self._session() as session:
            model = session.get(ContentModel, content_id)
            return self._to_entity(model) if model else None

    async def get_content_by_type(
        self, content_type: Union[ContentType, str]
    ) -> list[Content]:
        """Retourne les contenus du type donne."""
        value = (
            content_type.value
            if isinstance(content_type, ContentType)
            else content_type
        )
        return self._select_content(ContentModel.type == value)

    async def get_featured_content(self) -> list[Content]:
        """Retourne les contenus mis en avant."""
        return self._select_content(ContentModel.featured == True)  # noqa: E712

    async def search_content(self, query: str) -> list[Content]:
        """
        Recherche cote Python.

        lower() de SQLite ne gere que l'ASCII, le filtrage est donc fait sur
        les entites pour rester identique au stockage memoire.
        """
        return [c for c in self._select_content() if c.matches(query)]

    # --- Liste de favoris ---

    async def get_user_list(self, user_id: str) -> list[str]:
        """Retourne les IDs favoris dans l'ordre d'ajout."""
        statement = (
            select(UserListModel.content_id)
            .where(UserListModel.user_id == user_id)
            .order_by(UserListModel.position)
        )
        with self._session() as session:
            return list(session.exec(statement).all())

    def _insert_entry(self, session: Session, user_id: str, content_id: str) -> UserListEntry:
        model = UserListModel(
            id=str(uuid.uuid4()),
            user_id=user_id,
            content_id=content_id,
            added_at=datetime.now(timezone.utc),
        )
        session.add(model)
        session.commit()
        session.refresh(model)
        return self._entry_to_entity(model)

    async def add_to_user_list(self, user_id: str, content_id: str) -> UserListEntry:
        """
        Ajoute un favori sans verifier l'existence du contenu.

        La contrainte d'unicite empeche les doublons : un second ajout
        leve AlreadyInListError.
        """
        try:
            with self._session() as session:
                return self._insert_entry(session, user_id, content_id)
        except IntegrityError as e:
            raise AlreadyInListError(user_id, content_id) from e

    async def add_to_user_list_if_absent(
        self, user_id: str, content_id: str
    ) -> UserListEntry:
        """Ajoute un favori si le contenu existe ; l'unicite est garantie par la base."""
        try:
            with self._session() as session:
                if session.get(ContentModel, content_id) is None:
                    raise ContentNotFoundError(content_id)
                return self._insert_entry(session, user_id, content_id)
        except IntegrityError as e:
            raise AlreadyInListError(user_id, content_id) from e

    async def remove_from_user_list(self, user_id: str, content_id: str) -> bool:
        """Supprime la paire. Retourne True si une ligne a ete supprimee."""
        statement = select(UserListModel).where(
            UserListModel.user_id == user_id,
            UserListModel.content_id == content_id,
        )
        with self._session() as session:
            models = session.exec(statement).all()
            if not models:
                return False
            for model in models:
                session.delete(model)
            session.commit()
            return True

    async def is_in_user_list(self, user_id: str, content_id: str) -> bool:
        """Verifie la presence de la paire."""
        statement = select(UserListModel.position).where(
            UserListModel.user_id == user_id,
            UserListModel.content_id == content_id,
        )
        with self._session() as session:
            return session.exec(statement).first() is not None
