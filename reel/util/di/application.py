"""Application layer DI providers."""

from dishka import Scope, provide

from reel.application.loader import LoaderFactory
from reel.application.state import InFlightGuard
from reel.application.usecase.comment import SubmitCommentUseCase, SubmitReplyUseCase
from reel.application.usecase.review import CreateReviewUseCase, EditReviewUseCase
from reel.application.usecase.thread import DeleteUseCase, RefetchUseCase
from reel.application.usecase.vote import VoteUseCase
from reel.config import OptimisticSettings, PaginationSettings
from reel.domain.repository import MediaRepository, PostRepository, ReviewRepository
from reel.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_in_flight_guard(self) -> InFlightGuard:
        """Provide the in-flight guard shared by every vote."""
        return InFlightGuard()

    @provide(scope=Scope.REQUEST)
    def get_loader_factory(
        self,
        reviews: ReviewRepository,
        posts: PostRepository,
        media: MediaRepository,
        pagination: PaginationSettings,
    ) -> LoaderFactory:
        """Provide loader factory sized by the pagination settings."""
        return LoaderFactory(
            reviews=reviews, posts=posts, media=media, pagination=pagination
        )

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_refetch_use_case(
        self,
        reviews: ReviewRepository,
        posts: PostRepository,
        pagination: PaginationSettings,
    ) -> RefetchUseCase:
        """Provide refetch use case."""
        return RefetchUseCase(reviews=reviews, posts=posts, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_delete_use_case(
        self, reviews: ReviewRepository, posts: PostRepository
    ) -> DeleteUseCase:
        """Provide delete use case."""
        return DeleteUseCase(reviews=reviews, posts=posts)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(
        self,
        reviews: ReviewRepository,
        posts: PostRepository,
        guard: InFlightGuard,
        refetch: RefetchUseCase,
        settings: OptimisticSettings,
    ) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(
            reviews=reviews,
            posts=posts,
            guard=guard,
            refetch=refetch,
            settings=settings,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_reply_use_case(
        self,
        reviews: ReviewRepository,
        posts: PostRepository,
        settings: OptimisticSettings,
    ) -> SubmitReplyUseCase:
        """Provide submit reply use case."""
        return SubmitReplyUseCase(reviews=reviews, posts=posts, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_submit_comment_use_case(
        self, posts: PostRepository, settings: OptimisticSettings
    ) -> SubmitCommentUseCase:
        """Provide submit comment use case."""
        return SubmitCommentUseCase(posts=posts, settings=settings)

    # Review use cases
    @provide(scope=Scope.REQUEST)
    def get_create_review_use_case(
        self, reviews: ReviewRepository, settings: OptimisticSettings
    ) -> CreateReviewUseCase:
        """Provide create review use case."""
        return CreateReviewUseCase(reviews=reviews, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_edit_review_use_case(self, reviews: ReviewRepository) -> EditReviewUseCase:
        """Provide edit review use case."""
        return EditReviewUseCase(reviews=reviews)
