"""
Lakehouse REST API v1 endpoint table.

The v1 API predates the v2 resource layout: access control lives under
``/access`` (data policies and engine, bucket, catalog, database and
metastore grants), saved queries under ``/queries`` and CSV table creation
under ``/parse/csv`` and ``/v2/upload/csv``. Most v1 operations identify the
instance with an ``LhInstanceId`` header.

Entries use the same format as ``LAKEHOUSE_API_ENDPOINTS`` and are consumed by
the same ``request_builder.build_request``.
"""

from typing import Any, Dict

LAKEHOUSE_V1_API_ENDPOINTS: Dict[str, Dict[str, Any]] = {
    # ================================================================================
    # ACCESS CONTROL OPERATIONS
    # ================================================================================
    'create_db_conn_users': {
        'method': 'POST',
        'path': '/access/databases',
        'description': 'Grant users and groups permission to the db connection',
        'content_type': 'application/json',
        'parameters': {
            'database_id': {'type': 'str', 'location': 'body', 'description': 'The db connection id'},
            'groups': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The group list'},
            'users': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The user list'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_id'],
    },
    'list_data_policies': {
        'method': 'GET',
        'path': '/access/data_policies',
        'description': 'Get policies',
        'parameters': {
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
            'catalog_name': {'type': 'Optional[str]', 'location': 'query', 'description': 'catalog name to filter'},
            'status': {'type': 'Optional[str]', 'location': 'query', 'description': 'policy status to filter'},
            'include_metadata': {'type': 'Optional[bool]', 'location': 'query', 'description': 'response will include data policy meta data or not'},
            'include_rules': {'type': 'Optional[bool]', 'location': 'query', 'description': 'response will include data policy rules or not'},
        },
        'required': [],
    },
    'create_data_policy': {
        'method': 'POST',
        'path': '/access/data_policies',
        'description': 'Create new data policy',
        'content_type': 'application/json',
        'parameters': {
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'catalog name'},
            'data_artifact': {'type': 'str', 'location': 'body', 'description': 'data artifact'},
            'policy_name': {'type': 'str', 'location': 'body', 'description': 'the displayed name for data policy'},
            'rules': {'type': 'List[Dict[str, Any]]', 'location': 'body', 'description': 'rules'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'a more detailed description of the policy'},
            'status': {'type': 'Optional[str]', 'location': 'body', 'description': 'data policy status'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_name', 'data_artifact', 'policy_name', 'rules'],
    },
    'delete_data_policies': {
        'method': 'DELETE',
        'path': '/access/data_policies',
        'description': 'Revoke data policy access management policy',
        'content_type': 'application/json',
        'parameters': {
            'data_policies': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'data policy names array to be deleted'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'get_engine_users': {
        'method': 'GET',
        'path': '/access/engines/{engine_id}',
        'description': 'Get permission in the engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'Engine ID for GET'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'delete_engine_users': {
        'method': 'DELETE',
        'path': '/access/engines/{engine_id}',
        'description': 'Revoke permission to access engine',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'Engine ID for DELETE'},
            'groups': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'The group ids array to be deleted'},
            'users': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'The user names array to be deleted'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'update_engine_users': {
        'method': 'PATCH',
        'path': '/access/engines/{engine_id}',
        'description': 'Updates user and groups permission in the engine',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'Engine ID for PATCH'},
            'groups': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The group list'},
            'users': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The user list'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'delete_db_conn_users': {
        'method': 'DELETE',
        'path': '/access/databases/{database_id}',
        'description': 'Revoke permission to access db connection',
        'content_type': 'application/json',
        'parameters': {
            'database_id': {'type': 'str', 'location': 'path', 'description': 'Db connection id for DELETE'},
            'groups': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'The group ids array to be deleted'},
            'users': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'The user names array to be deleted'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_id'],
    },
    'update_db_conn_users': {
        'method': 'PATCH',
        'path': '/access/databases/{database_id}',
        'description': 'Updates user and groups permission in the db connection',
        'content_type': 'application/json',
        'parameters': {
            'database_id': {'type': 'str', 'location': 'path', 'description': 'Db connection id for PATCH'},
            'groups': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The group list'},
            'users': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The user list'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_id'],
    },
    'get_db_conn_users': {
        'method': 'GET',
        'path': '/access/databases/{database_id}',
        'description': 'Get permission in the db connection',
        'parameters': {
            'database_id': {'type': 'str', 'location': 'path', 'description': 'Db connection id for GET'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_id'],
    },
    'create_catalog_users': {
        'method': 'POST',
        'path': '/access/catalogs',
        'description': 'Grant users and groups permission to the catalog',
        'content_type': 'application/json',
        'parameters': {
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'The catalog name'},
            'groups': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The group list'},
            'users': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The user list'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_name'],
    },
    'get_catalog_users': {
        'method': 'GET',
        'path': '/access/catalogs/{catalog_name}',
        'description': 'Get users and groups permission in the catalog',
        'parameters': {
            'catalog_name': {'type': 'str', 'location': 'path', 'description': 'catalog name for GET'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_name'],
    },
    'delete_catalog_users': {
        'method': 'DELETE',
        'path': '/access/catalogs/{catalog_name}',
        'description': 'Revoke multiple users and groups permission to access catalog',
        'content_type': 'application/json',
        'parameters': {
            'catalog_name': {'type': 'str', 'location': 'path', 'description': 'Catalog name for DELETE'},
            'groups': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'The group ids array to be deleted'},
            'users': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'The user names array to be deleted'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_name'],
    },
    'update_catalog_users': {
        'method': 'PATCH',
        'path': '/access/catalogs/{catalog_name}',
        'description': 'Updates user and groups permission in the catalog',
        'content_type': 'application/json',
        'parameters': {
            'catalog_name': {'type': 'str', 'location': 'path', 'description': 'Catalog name for PATCH'},
            'groups': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The group list'},
            'users': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The user list'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_name'],
    },
    'evaluate': {
        'method': 'POST',
        'path': '/access/evaluation',
        'description': 'Evaluate permission',
        'content_type': 'application/json',
        'parameters': {
            'resources': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'resource list'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'get_policies_list': {
        'method': 'GET',
        'path': '/access/policies',
        'description': 'Get policies for specific catalog in catalog_name list',
        'parameters': {
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
            'catalog_list': {'type': 'Optional[List[str]]', 'location': 'query', 'description': 'policies for specific catalogs list'},
            'engine_list': {'type': 'Optional[List[str]]', 'location': 'query', 'description': 'policies for specific engines list'},
            'data_policies_list': {'type': 'Optional[List[str]]', 'location': 'query', 'description': 'policies for specific Data Polices list'},
            'include_data_policies': {'type': 'Optional[bool]', 'location': 'query', 'description': 'include policies for specific catalogs or not'},
        },
        'required': [],
    },
    'create_metastore_users': {
        'method': 'POST',
        'path': '/access/metastores',
        'description': 'Grant users and groups permission to the metastore',
        'content_type': 'application/json',
        'parameters': {
            'metastore_name': {'type': 'str', 'location': 'body', 'description': 'The metastore name'},
            'groups': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The group list'},
            'users': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The user list'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['metastore_name'],
    },
    'get_metastore_users': {
        'method': 'GET',
        'path': '/access/metastores/{metastore_name}',
        'description': 'Get permission in the metastore',
        'parameters': {
            'metastore_name': {'type': 'str', 'location': 'path', 'description': 'Metastore name for GET'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['metastore_name'],
    },
    'delete_metastore_users': {
        'method': 'DELETE',
        'path': '/access/metastores/{metastore_name}',
        'description': 'Revoke permission to access metastore',
        'content_type': 'application/json',
        'parameters': {
            'metastore_name': {'type': 'str', 'location': 'path', 'description': 'Metastore name for DELETE'},
            'groups': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'The group ids array to be deleted'},
            'users': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'The user names array to be deleted'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['metastore_name'],
    },
    'update_metastore_users': {
        'method': 'PATCH',
        'path': '/access/metastores/{metastore_name}',
        'description': 'Updates user and groups permission in the metastore',
        'content_type': 'application/json',
        'parameters': {
            'metastore_name': {'type': 'str', 'location': 'path', 'description': 'Metastore name for PATCH'},
            'groups': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The group list'},
            'users': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The user list'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['metastore_name'],
    },
    'create_bucket_users': {
        'method': 'POST',
        'path': '/access/buckets',
        'description': 'Grant users and groups permission to the bucket',
        'content_type': 'application/json',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'body', 'description': 'The bucket id'},
            'groups': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The group list'},
            'users': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The user list'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'get_default_policies': {
        'method': 'GET',
        'path': '/access/default_policies',
        'description': 'Get AMS default policies',
        'parameters': {
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'get_policy_version': {
        'method': 'GET',
        'path': '/access/policy_versions',
        'description': 'Get AMS policies version',
        'parameters': {
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'get_data_policy': {
        'method': 'GET',
        'path': '/access/data_policies/{policy_name}',
        'description': 'Get policy',
        'parameters': {
            'policy_name': {'type': 'str', 'location': 'path', 'description': 'policy name to get'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['policy_name'],
    },
    'replace_data_policy': {
        'method': 'PUT',
        'path': '/access/data_policies/{policy_name}',
        'description': 'Updates data policy',
        'content_type': 'application/json',
        'parameters': {
            'policy_name': {'type': 'str', 'location': 'path', 'description': 'Policy name for PATCH'},
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'catalog name'},
            'data_artifact': {'type': 'str', 'location': 'body', 'description': 'data artifact'},
            'rules': {'type': 'List[Dict[str, Any]]', 'location': 'body', 'description': 'rules'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'a more detailed description of the policy'},
            'status': {'type': 'Optional[str]', 'location': 'body', 'description': 'data policy status'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['policy_name', 'catalog_name', 'data_artifact', 'rules'],
    },
    'delete_data_policy': {
        'method': 'DELETE',
        'path': '/access/data_policies/{policy_name}',
        'description': 'Revoke data policy access management policy',
        'parameters': {
            'policy_name': {'type': 'str', 'location': 'path', 'description': 'Policy name for DELETE'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['policy_name'],
    },
    'create_engine_users': {
        'method': 'POST',
        'path': '/access/engines',
        'description': 'Grant permission to the engine',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'The engine id'},
            'groups': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The group list'},
            'users': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The user list'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'get_bucket_users': {
        'method': 'GET',
        'path': '/access/buckets/{bucket_id}',
        'description': 'Get permission in the bucket',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'path', 'description': 'Bucket name for GET'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'delete_bucket_users': {
        'method': 'DELETE',
        'path': '/access/buckets/{bucket_id}',
        'description': 'Revoke permission to access bucket',
        'content_type': 'application/json',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'path', 'description': 'Bucket ID for DELETE'},
            'groups': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'The group ids array to be deleted'},
            'users': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'The user names array to be deleted'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'update_bucket_users': {
        'method': 'PATCH',
        'path': '/access/buckets/{bucket_id}',
        'description': 'Updates user and groups permission in the bucket',
        'content_type': 'application/json',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'path', 'description': 'Bucket ID for PATCH'},
            'groups': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The group list'},
            'users': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'The user list'},
            'lh_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'LhInstanceId', 'description': 'Lake House Instance ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    # ================================================================================
    # BUCKET OPERATIONS
    # ================================================================================
    'get_buckets': {
        'method': 'GET',
        'path': '/buckets',
        'description': 'Get buckets',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'get_bucket_objects': {
        'method': 'GET',
        'path': '/buckets/bucket/objects',
        'description': 'Get bucket objects',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'query', 'description': 'Bucket ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'deactivate_bucket': {
        'method': 'POST',
        'path': '/buckets/bucket/deactivate',
        'description': 'Deactivate bucket',
        'content_type': 'application/json',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'body', 'description': 'Bucket name'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'register_bucket': {
        'method': 'POST',
        'path': '/buckets/bucket',
        'description': 'Register bucket',
        'content_type': 'application/json',
        'parameters': {
            'bucket_details': {'type': 'Dict[str, Any]', 'location': 'body', 'description': 'Bucket Details'},
            'description': {'type': 'str', 'location': 'body', 'description': 'Bucket description'},
            'table_type': {'type': 'str', 'location': 'body', 'description': 'Table type'},
            'bucket_type': {'type': 'str', 'location': 'body', 'description': 'Bucket Type'},
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'Catalog name for the new catalog to be created with bucket'},
            'managed_by': {'type': 'str', 'location': 'body', 'description': 'Managed by'},
            'bucket_display_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Bucket Display name'},
            'bucket_tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'tags'},
            'catalog_tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'Catalog tags'},
            'thrift_uri': {'type': 'Optional[str]', 'location': 'body', 'description': 'Thrift URI'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_details', 'description', 'table_type', 'bucket_type', 'catalog_name', 'managed_by'],
    },
    'unregister_bucket': {
        'method': 'DELETE',
        'path': '/buckets/bucket',
        'description': 'Unregister Bucket',
        'content_type': 'application/json',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'body', 'description': 'Bucket name'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'update_bucket': {
        'method': 'PATCH',
        'path': '/buckets/bucket',
        'description': 'Update bucket',
        'content_type': 'application/json',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'body', 'description': 'Bucket ID auto generated during bucket registration'},
            'access_key': {'type': 'Optional[str]', 'location': 'body', 'description': 'Access key ID, encrypted during bucket registration'},
            'bucket_display_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Bucket display name'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'Modified description'},
            'secret_key': {'type': 'Optional[str]', 'location': 'body', 'description': 'Secret access key, encrypted during bucket registration'},
            'tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'Tags'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'activate_bucket': {
        'method': 'POST',
        'path': '/buckets/bucket/activate',
        'description': 'Active bucket',
        'content_type': 'application/json',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'body', 'description': 'Bucket name'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    # ================================================================================
    # DATABASE OPERATIONS
    # ================================================================================
    'get_databases': {
        'method': 'GET',
        'path': '/databases',
        'description': 'Get databases',
        'parameters': {
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'create_database_catalog': {
        'method': 'POST',
        'path': '/databases/database',
        'description': 'Add/Create database',
        'content_type': 'application/json',
        'parameters': {
            'database_display_name': {'type': 'str', 'location': 'body', 'description': 'Database display name'},
            'database_type': {'type': 'str', 'location': 'body', 'description': 'Connector type'},
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'Catalog name of the new catalog to be created with database'},
            'database_details': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'database details'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'Database description'},
            'tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'tags'},
            'created_by': {'type': 'Optional[str]', 'location': 'body', 'description': 'Created by'},
            'created_on': {'type': 'Optional[int]', 'location': 'body', 'description': 'Created on'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_display_name', 'database_type', 'catalog_name'],
    },
    'delete_database_catalog': {
        'method': 'DELETE',
        'path': '/databases/database',
        'description': 'Delete database',
        'content_type': 'application/json',
        'parameters': {
            'database_id': {'type': 'str', 'location': 'body', 'description': 'Database ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_id'],
    },
    'update_database': {
        'method': 'PATCH',
        'path': '/databases/database',
        'description': 'Update database',
        'content_type': 'application/json',
        'parameters': {
            'database_id': {'type': 'str', 'location': 'body', 'description': 'Database ID'},
            'database_details': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'database details'},
            'database_display_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Database display name'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'Database description'},
            'tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'tags'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_id'],
    },
    # ================================================================================
    # ENGINE OPERATIONS
    # ================================================================================
    'pause_engine': {
        'method': 'POST',
        'path': '/engines/engine/pause',
        'description': 'Pause engine',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'Engine ID to be paused'},
            'created_by': {'type': 'Optional[str]', 'location': 'body', 'description': 'Created by - Logged in username'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'get_engines': {
        'method': 'GET',
        'path': '/engines',
        'description': 'Get engines',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'get_deployments': {
        'method': 'GET',
        'path': '/instance',
        'description': 'Get instance details',
        'parameters': {
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'update_engine': {
        'method': 'PATCH',
        'path': '/engines/engine',
        'description': 'Update engine',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'Engine ID'},
            'coordinator': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'NodeDescription'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'Modified description'},
            'engine_display_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine display name'},
            'tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'Tags'},
            'worker': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'NodeDescription'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'create_engine': {
        'method': 'POST',
        'path': '/engines/engine',
        'description': 'Create engine',
        'content_type': 'application/json',
        'parameters': {
            'version': {'type': 'str', 'location': 'body', 'description': 'Version like 0.278 for presto or else'},
            'engine_details': {'type': 'Dict[str, Any]', 'location': 'body', 'description': 'Node details'},
            'origin': {'type': 'str', 'location': 'body', 'description': 'Origin - created or registered'},
            'type': {'type': 'str', 'location': 'body', 'description': 'Engine type presto, others like netezza'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine description'},
            'engine_display_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine display name'},
            'first_time_use': {'type': 'Optional[bool]', 'location': 'body', 'description': 'Optional parameter for UI - set as true when first time use'},
            'region': {'type': 'Optional[str]', 'location': 'body', 'description': 'Region (cloud)'},
            'associated_catalogs': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'Associated catalogs'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['version', 'engine_details', 'origin', 'type'],
    },
    'delete_engine': {
        'method': 'DELETE',
        'path': '/engines/engine',
        'description': 'Delete engine',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'Engine ID'},
            'created_by': {'type': 'Optional[str]', 'location': 'body', 'description': 'Created by'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'resume_engine': {
        'method': 'POST',
        'path': '/engines/engine/resume',
        'description': 'Resume engine',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'Engine ID to be resumed'},
            'created_by': {'type': 'Optional[str]', 'location': 'body', 'description': 'Created by - logged in username'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'explain_analyze_statement': {
        'method': 'POST',
        'path': '/explainanalyze',
        'description': 'Explain analyze',
        'content_type': 'application/json',
        'parameters': {
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'Catalog name'},
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'Engine name'},
            'schema_name': {'type': 'str', 'location': 'body', 'description': 'Schema name'},
            'statement': {'type': 'str', 'location': 'body', 'description': 'Statement'},
            'verbose': {'type': 'Optional[bool]', 'location': 'body', 'description': 'Verbose'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_name', 'engine_id', 'schema_name', 'statement'],
    },
    'explain_statement': {
        'method': 'POST',
        'path': '/explain',
        'description': 'Explain',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'Engine name'},
            'statement': {'type': 'str', 'location': 'body', 'description': 'Statement'},
            'catalog_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Catalog name'},
            'format': {'type': 'Optional[str]', 'location': 'body', 'description': 'Format'},
            'schema_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Schema name'},
            'type': {'type': 'Optional[str]', 'location': 'body', 'description': 'Type'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'statement'],
    },
    'test_lh_console': {
        'method': 'GET',
        'path': '/ready',
        'description': 'Readiness API',
        'parameters': {},
        'required': [],
    },
    # ================================================================================
    # METASTORE OPERATIONS
    # ================================================================================
    'get_metastores': {
        'method': 'GET',
        'path': '/catalogs',
        'description': 'Get Catalogs',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'get_hms': {
        'method': 'GET',
        'path': '/metastores',
        'description': 'Get Metastore',
        'parameters': {
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'add_metastore_to_engine': {
        'method': 'POST',
        'path': '/catalogs/add_catalog_to_engine',
        'description': 'Add catalog to engine',
        'content_type': 'application/json',
        'parameters': {
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'Catalog name'},
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'Engine name'},
            'created_by': {'type': 'Optional[str]', 'location': 'body', 'description': 'Created by'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_name', 'engine_id'],
    },
    'remove_catalog_from_engine': {
        'method': 'POST',
        'path': '/catalogs/remove_catalog_from_engine',
        'description': 'Remove catalog from engine',
        'content_type': 'application/json',
        'parameters': {
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'Catalog name'},
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'Engine name'},
            'created_by': {'type': 'Optional[str]', 'location': 'body', 'description': 'Created by'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_name', 'engine_id'],
    },
    # ================================================================================
    # SAVED QUERY OPERATIONS
    # ================================================================================
    'save_query': {
        'method': 'POST',
        'path': '/queries/{query_name}',
        'description': 'Save query',
        'content_type': 'application/json',
        'parameters': {
            'query_name': {'type': 'str', 'location': 'path', 'description': 'Query name'},
            'created_by': {'type': 'str', 'location': 'body', 'description': 'Created by'},
            'description': {'type': 'str', 'location': 'body', 'description': 'Description'},
            'query_string': {'type': 'str', 'location': 'body', 'description': 'Query string'},
            'created_on': {'type': 'Optional[str]', 'location': 'body', 'description': 'Created on'},
            'engine_id': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['query_name', 'created_by', 'description', 'query_string'],
    },
    'delete_query': {
        'method': 'DELETE',
        'path': '/queries/{query_name}',
        'description': 'Delete query',
        'parameters': {
            'query_name': {'type': 'str', 'location': 'path', 'description': 'Query name'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['query_name'],
    },
    'update_query': {
        'method': 'PATCH',
        'path': '/queries/{query_name}',
        'description': 'Update query',
        'content_type': 'application/json',
        'parameters': {
            'query_name': {'type': 'str', 'location': 'path', 'description': 'Query name'},
            'query_string': {'type': 'str', 'location': 'body', 'description': 'Query string'},
            'description': {'type': 'str', 'location': 'body', 'description': 'Description'},
            'new_query_name': {'type': 'str', 'location': 'body', 'description': 'New query name'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['query_name', 'query_string', 'description', 'new_query_name'],
    },
    'get_queries': {
        'method': 'GET',
        'path': '/queries',
        'description': 'Get queries',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    # ================================================================================
    # SCHEMA OPERATIONS
    # ================================================================================
    'create_schema': {
        'method': 'POST',
        'path': '/schemas/schema',
        'description': 'Create schema',
        'content_type': 'application/json',
        'parameters': {
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'Catalog name'},
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'Engine ID'},
            'schema_name': {'type': 'str', 'location': 'body', 'description': 'Schema name'},
            'bucket_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Bucket associated to metastore where schema will be added'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_name', 'engine_id', 'schema_name'],
    },
    'delete_schema': {
        'method': 'DELETE',
        'path': '/schemas/schema',
        'description': 'Delete schema',
        'content_type': 'application/json',
        'parameters': {
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'Catalog name'},
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'Engine ID'},
            'schema_name': {'type': 'str', 'location': 'body', 'description': 'Schema name'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_name', 'engine_id', 'schema_name'],
    },
    'get_schemas': {
        'method': 'GET',
        'path': '/schemas',
        'description': 'Get schemas',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'Engine name'},
            'catalog_name': {'type': 'str', 'location': 'query', 'description': 'Catalog name'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_name'],
    },
    # ================================================================================
    # STATEMENT AND TABLE OPERATIONS
    # ================================================================================
    'post_query': {
        'method': 'POST',
        'path': '/v1/statement',
        'description': 'Run SQL statement',
        'content_type': 'multipart/form-data',
        'parameters': {
            'engine': {'type': 'str', 'location': 'query', 'description': 'Presto engine name'},
            'catalog': {'type': 'str', 'location': 'form', 'description': 'Catalog name'},
            'schema': {'type': 'str', 'location': 'form', 'description': 'Schema name'},
            'sql_query': {'type': 'str', 'location': 'form', 'name': 'sqlQuery', 'description': 'SQL Query'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine', 'catalog', 'schema', 'sql_query'],
    },
    'delete_table': {
        'method': 'DELETE',
        'path': '/tables/table',
        'description': 'Delete table',
        'content_type': 'application/json',
        'parameters': {
            'delete_tables': {'type': 'List[Dict[str, Any]]', 'location': 'body', 'description': 'Delete table list'},
            'engine_id': {'type': 'str', 'location': 'body', 'description': 'Engine ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['delete_tables', 'engine_id'],
    },
    'update_table': {
        'method': 'PATCH',
        'path': '/tables/table',
        'description': 'Update table',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'Engine name'},
            'catalog_name': {'type': 'str', 'location': 'query', 'description': 'Catalog name'},
            'schema_name': {'type': 'str', 'location': 'query', 'description': 'Schema name'},
            'table_name': {'type': 'str', 'location': 'query', 'description': 'Table name'},
            'add_columns': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'Add columns'},
            'drop_columns': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'Drop columns'},
            'new_table_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'New table name'},
            'rename_columns': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'Rename columns'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_name', 'schema_name', 'table_name'],
    },
    'get_table_snapshots': {
        'method': 'GET',
        'path': '/tables/table/snapshots',
        'description': 'Get table snapshots',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'Engine name'},
            'catalog_name': {'type': 'str', 'location': 'query', 'description': 'Catalog name'},
            'schema_name': {'type': 'str', 'location': 'query', 'description': 'Schema name'},
            'table_name': {'type': 'str', 'location': 'query', 'description': 'Table name'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_name', 'schema_name', 'table_name'],
    },
    'rollback_snapshot': {
        'method': 'POST',
        'path': '/tables/table/rollback',
        'description': 'Rollback snapshot',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'Engine name'},
            'catalog_name': {'type': 'str', 'location': 'query', 'description': 'Catalog name'},
            'schema_name': {'type': 'str', 'location': 'query', 'description': 'Schema name'},
            'snapshot_id': {'type': 'str', 'location': 'body', 'description': 'Snapshot id'},
            'table_name': {'type': 'str', 'location': 'body', 'description': 'Table name'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_name', 'schema_name', 'snapshot_id', 'table_name'],
    },
    'get_tables': {
        'method': 'GET',
        'path': '/tables',
        'description': 'Get tables',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'Engine name'},
            'catalog_name': {'type': 'str', 'location': 'query', 'description': 'Catalog name'},
            'schema_name': {'type': 'str', 'location': 'query', 'description': 'Schema name'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_name', 'schema_name'],
    },
    # ================================================================================
    # CSV UPLOAD OPERATIONS
    # ================================================================================
    'parse_csv': {
        'method': 'POST',
        'path': '/parse/csv',
        'description': 'Parse CSV for table creation',
        'content_type': 'multipart/form-data',
        'parameters': {
            'engine': {'type': 'str', 'location': 'query', 'description': 'Presto engine name'},
            'parse_file': {'type': 'str', 'location': 'form', 'description': 'parse file to data type'},
            'file_type': {'type': 'str', 'location': 'form', 'description': 'File type'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine', 'parse_file', 'file_type'],
    },
    'upload_csv': {
        'method': 'POST',
        'path': '/v2/upload/csv',
        'description': 'Upload CSV for table creation',
        'content_type': 'multipart/form-data',
        'parameters': {
            'engine': {'type': 'str', 'location': 'query', 'description': 'Presto engine name'},
            'catalog': {'type': 'str', 'location': 'form', 'description': 'Catalog name'},
            'schema': {'type': 'str', 'location': 'form', 'description': 'Schema name'},
            'table_name': {'type': 'str', 'location': 'form', 'name': 'tableName', 'description': 'table name'},
            'ingestion_job_name': {'type': 'str', 'location': 'form', 'name': 'ingestionJobName', 'description': 'ingestion job name'},
            'scheduled': {'type': 'str', 'location': 'form', 'description': 'Scheduled'},
            'created_by': {'type': 'str', 'location': 'form', 'description': 'Created by'},
            'target_table': {'type': 'str', 'location': 'form', 'name': 'targetTable', 'description': 'Target table'},
            'csv_headers': {'type': 'str', 'location': 'form', 'name': 'headers', 'description': 'Headers'},
            'csv': {'type': 'str', 'location': 'form', 'description': 'csv'},
            'accept': {'type': 'Optional[str]', 'location': 'header', 'name': 'Accept', 'description': 'The type of the response'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine', 'catalog', 'schema', 'table_name', 'ingestion_job_name', 'scheduled', 'created_by', 'target_table', 'csv_headers', 'csv'],
    },
}
