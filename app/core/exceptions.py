class AppError(Exception):
    code = "APP_ERROR"
    status_code = 500
    message = "오류가 발생했습니다. 다시 시도해주세요."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class Unauthenticated(AppError):
    code = "UNAUTHENTICATED"
    status_code = 401
    message = "로그인이 필요합니다."


class Forbidden(AppError):
    code = "FORBIDDEN"
    status_code = 403
    message = "접근 권한이 없습니다."


class ProfileMissing(AppError):
    code = "PROFILE_MISSING"
    status_code = 404
    message = "프로필을 먼저 등록해주세요."


class ProfileAlreadyExists(AppError):
    code = "PROFILE_ALREADY_EXISTS"
    status_code = 409
    message = "이미 프로필이 등록되어 있습니다. 저장 후에는 정보를 수정할 수 없습니다."


class SeatTaken(AppError):
    code = "SEAT_TAKEN"
    status_code = 409
    message = "이미 사용 중인 참가자 번호입니다."


class InvalidVoteTarget(AppError):
    code = "INVALID_VOTE_TARGET"
    status_code = 400
    message = "선택할 수 없는 상대입니다."


class VotingClosed(AppError):
    code = "VOTING_CLOSED"
    status_code = 403
    message = "운영진이 투표를 시작하면 선택할 수 있습니다."


class ResultsClosed(AppError):
    code = "RESULTS_CLOSED"
    status_code = 403
    message = "아직 결과가 공개되지 않았습니다."


class TimeSlotNotFound(AppError):
    code = "TIME_SLOT_NOT_FOUND"
    status_code = 404
    message = "존재하지 않는 시간대입니다."


class MatchLookupFailed(AppError):
    code = "MATCH_LOOKUP_FAILED"
    status_code = 500
    message = "매칭 결과를 불러오는 중 오류가 발생했습니다."


class VoteSubmissionFailed(AppError):
    code = "VOTE_SUBMISSION_FAILED"
    status_code = 500
    message = "투표 저장에 실패했습니다. 다시 시도해주세요."


class UserNotFound(AppError):
    code = "USER_NOT_FOUND"
    status_code = 404
    message = "존재하지 않는 사용자입니다."
