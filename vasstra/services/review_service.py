# vasstra/services/review_service.py
from vasstra.repositories.json_repo import JsonListRepository
from vasstra.schemas.common import ProductId
from vasstra.schemas.review import Review


class ReviewService:
    """
    Reviews written on this device, newest first.

    Reads never fail: an unreadable store yields no reviews.
    """

    def __init__(self, repo: JsonListRepository[Review]):
        self.repo = repo

    def get_all_reviews(self) -> list[Review]:
        return self.repo.load()

    def get_stored_reviews(self, product_id: ProductId) -> list[Review]:
        return [r for r in self.repo.load() if r.product_id == product_id]

    def save_review(self, review: Review) -> None:
        self.repo.save([review, *self.repo.load()])
