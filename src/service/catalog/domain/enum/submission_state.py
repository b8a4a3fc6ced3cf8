from enum import Enum


class SubmissionState(str, Enum):
    IDLE = 'idle'
    VALIDATING = 'validating'
    CREATING_ENTITY = 'creating_entity'
    UPLOADING_MEDIA = 'uploading_media'
    UPDATING_ENTITY_WITH_MEDIA = 'updating_entity_with_media'
    DONE = 'done'
    FAILED = 'failed'
