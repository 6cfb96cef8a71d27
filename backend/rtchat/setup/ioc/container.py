"""
Dishka DI Container Setup.

Guidelines:
- Registers all dependencies (store, repositories, services, handlers)
- Maps abstract interfaces to concrete implementations
- Manages lifecycle (APP = one per container, REQUEST = per-request)

Every container owns its own process-scoped state (store, subscription
registry, scheduler), so independent app instances never share conversations
or subscribers.

Flow:
  Container → provides → InMemoryConversationRepository → to → AppendMessageHandler
                                    ↓
                            uses ConversationRepository interface
"""

from collections.abc import AsyncIterable

from dishka import Provider, Scope, make_async_container, provide, AsyncContainer

from rtchat.application.commands.auth import AuthenticateHandler
from rtchat.application.commands.conversations import (
    AppendMessageHandler,
    StartConversationHandler,
)
from rtchat.application.queries.conversations import (
    GetConversationHandler,
    ListConversationsHandler,
)
from rtchat.application.services import (
    AuthorizationGate,
    AutoReplyService,
    BroadcastDispatcher,
    SubscriptionService,
)
from rtchat.config.settings import Config
from rtchat.domain.ports.credentials import CredentialCodec
from rtchat.domain.ports.realtime import SubscriptionRegistry
from rtchat.domain.ports.repositories import ConversationRepository, UserRepository
from rtchat.domain.ports.scheduler import TaskScheduler
from rtchat.infrastructure.persistence import (
    InMemoryConversationRepository,
    InMemoryStore,
    InMemoryUserRepository,
    demo_conversations,
    demo_users,
)
from rtchat.infrastructure.realtime import InMemorySubscriptionRegistry
from rtchat.infrastructure.scheduling import AsyncioTaskScheduler
from rtchat.infrastructure.security import JwtCredentialCodec, OpaqueCredentialCodec
from rtchat.utils.keyed_lock import KeyedLock


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations.
    """

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    # ==================== STORE ====================

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """
        Provide the in-memory entity store (one per container).

        Seeded with the demo users and conversations when SEED_DEMO_DATA is on.
        """
        if self._config.SEED_DEMO_DATA:
            return InMemoryStore(users=demo_users(), conversations=demo_conversations())
        return InMemoryStore()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.APP)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        return InMemoryUserRepository(store)

    @provide(scope=Scope.APP)
    def get_conversation_repository(self, store: InMemoryStore) -> ConversationRepository:
        """
        Provide ConversationRepository implementation.

        - Return type is ABSTRACT (ConversationRepository)
        - Implementation is CONCRETE (InMemoryConversationRepository)
        - Scope.APP because background tasks outlive the request that started them
        """
        return InMemoryConversationRepository(store)

    # ==================== CONCURRENCY ====================

    @provide(scope=Scope.APP)
    def get_conversation_locks(self) -> KeyedLock:
        return KeyedLock()

    @provide(scope=Scope.APP)
    async def get_scheduler(self) -> AsyncIterable[TaskScheduler]:
        """Pending deferred tasks are cancelled when the container closes."""
        scheduler = AsyncioTaskScheduler()
        yield scheduler
        await scheduler.aclose()

    # ==================== AUTH ====================

    @provide(scope=Scope.APP)
    def get_credential_codec(self) -> CredentialCodec:
        if self._config.AUTH_TOKEN_MODE == "jwt":
            return JwtCredentialCodec(
                secret=self._config.SERVICE_AUTH_SECRET,
                issuer=self._config.SERVICE_AUTH_ISSUER,
                audience=self._config.SERVICE_AUTH_AUDIENCE,
                ttl_seconds=self._config.SERVICE_AUTH_TTL_SECONDS,
            )
        return OpaqueCredentialCodec()

    @provide(scope=Scope.APP)
    def get_authorization_gate(
        self, user_repository: UserRepository, credential_codec: CredentialCodec
    ) -> AuthorizationGate:
        return AuthorizationGate(user_repository, credential_codec)

    # ==================== REALTIME ====================

    @provide(scope=Scope.APP)
    def get_subscription_registry(self) -> SubscriptionRegistry:
        return InMemorySubscriptionRegistry()

    @provide(scope=Scope.APP)
    def get_broadcast_dispatcher(self, registry: SubscriptionRegistry) -> BroadcastDispatcher:
        return BroadcastDispatcher(
            registry, send_timeout=self._config.BROADCAST_SEND_TIMEOUT_SECONDS
        )

    @provide(scope=Scope.APP)
    def get_auto_reply_service(
        self,
        conversation_repository: ConversationRepository,
        dispatcher: BroadcastDispatcher,
        scheduler: TaskScheduler,
        locks: KeyedLock,
    ) -> AutoReplyService:
        return AutoReplyService(
            conversation_repository=conversation_repository,
            dispatcher=dispatcher,
            scheduler=scheduler,
            locks=locks,
            delay=self._config.AUTO_REPLY_DELAY_SECONDS,
            reply_text=self._config.AUTO_REPLY_TEXT,
            cancel_pending=self._config.AUTO_REPLY_CANCEL_PENDING,
        )

    @provide(scope=Scope.APP)
    def get_subscription_service(
        self,
        gate: AuthorizationGate,
        conversation_repository: ConversationRepository,
        registry: SubscriptionRegistry,
    ) -> SubscriptionService:
        return SubscriptionService(gate, conversation_repository, registry)

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_authenticate_handler(self, gate: AuthorizationGate) -> AuthenticateHandler:
        return AuthenticateHandler(gate)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self, conversation_repository: ConversationRepository
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_conversation_handler(
        self, conversation_repository: ConversationRepository, gate: AuthorizationGate
    ) -> GetConversationHandler:
        return GetConversationHandler(conversation_repository, gate)

    @provide(scope=Scope.REQUEST)
    def get_start_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> StartConversationHandler:
        return StartConversationHandler(
            conversation_repository, seed_text=self._config.CONVERSATION_SEED_TEXT
        )

    @provide(scope=Scope.REQUEST)
    def get_append_message_handler(
        self,
        conversation_repository: ConversationRepository,
        gate: AuthorizationGate,
        locks: KeyedLock,
        dispatcher: BroadcastDispatcher,
        auto_reply: AutoReplyService,
        scheduler: TaskScheduler,
    ) -> AppendMessageHandler:
        return AppendMessageHandler(
            conversation_repository=conversation_repository,
            gate=gate,
            locks=locks,
            dispatcher=dispatcher,
            auto_reply=auto_reply,
            scheduler=scheduler,
        )


def create_container(config: type[Config] = Config) -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE per app instance
    """
    return make_async_container(AppProvider(config))
