from prometheus_client import Counter

CONSULTATIONS_CREATED_TOTAL = Counter(
    "consultations_created_total",
    "Number of consultations posted via consultations-service",
)

PROPOSALS_CREATED_TOTAL = Counter(
    "proposals_created_total",
    "Number of trainer proposals submitted via consultations-service",
)

PROPOSALS_REJECTED_TOTAL = Counter(
    "proposals_rejected_total",
    "Number of proposal submissions rejected",
    ["reason"],  # unapproved | duplicate | invalid_program
)

BEST_ANSWERS_SELECTED_TOTAL = Counter(
    "best_answers_selected_total",
    "Number of best-answer selections by consultation owners",
)

TRAINER_APPROVAL_CHANGES_TOTAL = Counter(
    "trainer_approval_changes_total",
    "Number of admin trainer approval changes",
    ["action"],  # approve | revoke
)

PROFILE_PHOTOS_UPLOADED_TOTAL = Counter(
    "profile_photos_uploaded_total",
    "Number of profile photos uploaded to object storage",
)
