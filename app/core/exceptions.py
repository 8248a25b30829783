from fastapi import HTTPException, status


class CardNotFoundException(HTTPException):
    def __init__(self, card_id: int):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Card with id {card_id} not found."
        )


class BulkCreateFailedException(HTTPException):
    def __init__(self, index: int):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Bulk creation failed; no cards were stored.",
                "index": index,
            }
        )
