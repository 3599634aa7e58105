"""Metadata registry GraphQL documents.

Centralized GraphQL operations against the registry's ``storage`` schema.
"""

FILE_METADATA_FIELDS = """
    id
    name
    size
    bucketId
    etag
    createdAt
    updatedAt
    isUploaded
    mimeType
    uploadedByUserId
    blurhash
"""

BUCKET_GET_BY_ID = """
query GetBucket($id: String!) {
    bucket(id: $id) {
        id
        minUploadFileSize
        maxUploadFileSize
        presignedUrlsEnabled
        downloadExpiration
        cacheControl
        createdAt
        updatedAt
    }
}
"""

FILE_INSERT = """
mutation InsertFile($object: storage_files_insert_input!) {
    insertFile(object: $object) {
        id
    }
}
"""

FILE_UPDATE = """
mutation UpdateFile($id: uuid!, $set: storage_files_set_input!) {
    updateFile(pk_columns: {id: $id}, _set: $set) {
%s
    }
}
""" % FILE_METADATA_FIELDS

FILE_DELETE = """
mutation DeleteFile($id: uuid!) {
    deleteFile(id: $id) {
        id
    }
}
"""
