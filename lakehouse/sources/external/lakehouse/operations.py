"""
Lakehouse REST API endpoint table.

Every operation of the lakehouse management API v2 is described here as data
and consumed by ``request_builder.build_request``. The v1 table lives in
``operations_v1``; ``API_VERSIONS`` maps a version to its table.

Parameter ``location`` is one of:

- ``path``: substituted (URL-encoded) into the path template
- ``query``: query string parameter
- ``header``: request header, ``name`` is the header name
- ``body``: member of the JSON request body
- ``payload``: the whole JSON request body (e.g. JSON Patch documents)
- ``form``: multipart form field
- ``file``: multipart file part, optionally naming the parameter that holds the
  part filename as ``filename_param``
- ``file_content_type``: content type of the file part named by ``name``

When the wire name differs from the Python parameter name it is given as
``name``. Listing operations that are paged by the service carry a
``pagination`` descriptor naming the items field of the result, the cursor
parameter and the page size parameter.
"""

from typing import Any, Dict, List, Optional

from lakehouse.config.constants.service import SERVICE_VERSION
from lakehouse.sources.external.lakehouse.operations_v1 import LAKEHOUSE_V1_API_ENDPOINTS

LAKEHOUSE_API_ENDPOINTS: Dict[str, Dict[str, Any]] = {
    # ================================================================================
    # BUCKET OPERATIONS
    # ================================================================================
    'list_bucket_registrations': {
        'method': 'GET',
        'path': '/bucket_registrations',
        'description': 'Get bucket registrations',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'create_bucket_registration': {
        'method': 'POST',
        'path': '/bucket_registrations',
        'description': 'Register bucket',
        'content_type': 'application/json',
        'parameters': {
            'bucket_details': {'type': 'Dict[str, Any]', 'location': 'body', 'description': 'bucket details'},
            'bucket_type': {'type': 'str', 'location': 'body', 'description': 'bucket type'},
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'catalog name'},
            'description': {'type': 'str', 'location': 'body', 'description': 'bucket description'},
            'managed_by': {'type': 'str', 'location': 'body', 'description': 'managed by'},
            'table_type': {'type': 'str', 'location': 'body', 'description': 'Table type'},
            'bucket_display_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'bucket display name'},
            'bucket_tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'tags'},
            'catalog_tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'catalog tags'},
            'region': {'type': 'Optional[str]', 'location': 'body', 'description': 'region where the bucket is located'},
            'state': {'type': 'Optional[str]', 'location': 'body', 'description': 'mark bucket active or inactive'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_details', 'bucket_type', 'catalog_name', 'description', 'managed_by', 'table_type'],
    },
    'get_bucket_registration': {
        'method': 'GET',
        'path': '/bucket_registrations/{bucket_id}',
        'description': 'Get bucket',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'path', 'description': 'bucket id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'delete_bucket_registration': {
        'method': 'DELETE',
        'path': '/bucket_registrations/{bucket_id}',
        'description': 'Unregister Bucket',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'path', 'description': 'bucket id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'update_bucket_registration': {
        'method': 'PATCH',
        'path': '/bucket_registrations/{bucket_id}',
        'description': 'Update bucket',
        'content_type': 'application/json-patch+json',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'path', 'description': 'bucket id'},
            'body': {'type': 'List[Dict[str, Any]]', 'location': 'payload', 'description': 'Request body'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id', 'body'],
    },
    'create_activate_bucket': {
        'method': 'POST',
        'path': '/bucket_registrations/{bucket_id}/activate',
        'description': 'Activate Bucket',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'path', 'description': 'bucket id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'delete_deactivate_bucket': {
        'method': 'DELETE',
        'path': '/bucket_registrations/{bucket_id}/deactivate',
        'description': 'Deactivate Bucket',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'path', 'description': 'bucket id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'list_bucket_objects': {
        'method': 'GET',
        'path': '/bucket_registrations/{bucket_id}/objects',
        'description': 'List bucket objects',
        'parameters': {
            'bucket_id': {'type': 'str', 'location': 'path', 'description': 'bucket id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['bucket_id'],
    },
    'test_bucket_connection': {
        'method': 'POST',
        'path': '/test_bucket_connection',
        'description': 'Check bucket credentials to be valid',
        'content_type': 'application/json',
        'parameters': {
            'access_key': {'type': 'str', 'location': 'body', 'description': 'access key to access the bucket'},
            'bucket_name': {'type': 'str', 'location': 'body', 'description': 'name of the bucket to be checked'},
            'bucket_type': {'type': 'str', 'location': 'body', 'description': 'type of bucket that is selected'},
            'endpoint': {'type': 'str', 'location': 'body', 'description': 'endpoint to reach the bucket'},
            'region': {'type': 'str', 'location': 'body', 'description': 'bucket region'},
            'secret_key': {'type': 'str', 'location': 'body', 'description': 'secret key to access the bucket'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['access_key', 'bucket_name', 'bucket_type', 'endpoint', 'region', 'secret_key'],
    },

    # ================================================================================
    # DATABASE OPERATIONS
    # ================================================================================
    'create_driver_database_catalog': {
        'method': 'POST',
        'path': '/database_driver_registrations',
        'description': 'Add/Create database with driver',
        'content_type': 'multipart/form-data',
        'parameters': {
            'database_display_name': {'type': 'str', 'location': 'form', 'description': 'Database display name'},
            'database_type': {'type': 'str', 'location': 'form', 'description': 'Connector type'},
            'catalog_name': {'type': 'str', 'location': 'form', 'description': 'Catalog name'},
            'hostname': {'type': 'str', 'location': 'form', 'description': 'Host name'},
            'port': {'type': 'str', 'location': 'form', 'description': 'Port'},
            'driver': {'type': 'Optional[bytes]', 'location': 'file', 'filename_param': 'driver_file_name', 'description': 'Driver file to upload'},
            'driver_content_type': {'type': 'Optional[str]', 'location': 'file_content_type', 'name': 'driver', 'description': 'The content type of driver'},
            'driver_file_name': {'type': 'Optional[str]', 'location': 'form', 'description': 'Name of the driver file'},
            'certificate': {'type': 'Optional[str]', 'location': 'form', 'description': 'contents of a pem/crt file'},
            'certificate_extension': {'type': 'Optional[str]', 'location': 'form', 'description': 'extension of the certificate file'},
            'ssl': {'type': 'Optional[str]', 'location': 'form', 'description': 'SSL Mode'},
            'username': {'type': 'Optional[str]', 'location': 'form', 'description': 'Username'},
            'password': {'type': 'Optional[str]', 'location': 'form', 'description': 'Password'},
            'database_name': {'type': 'Optional[str]', 'location': 'form', 'description': 'Database name'},
            'description': {'type': 'Optional[str]', 'location': 'form', 'description': 'Database description'},
            'created_on': {'type': 'Optional[str]', 'location': 'form', 'description': 'Created on'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_display_name', 'database_type', 'catalog_name', 'hostname', 'port'],
    },
    'list_database_registrations': {
        'method': 'GET',
        'path': '/database_registrations',
        'description': 'Get databases',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'create_database_registration': {
        'method': 'POST',
        'path': '/database_registrations',
        'description': 'Add/Create database',
        'content_type': 'application/json',
        'parameters': {
            'catalog_name': {'type': 'str', 'location': 'body', 'description': 'Catalog name'},
            'database_display_name': {'type': 'str', 'location': 'body', 'description': 'Database display name'},
            'database_type': {'type': 'str', 'location': 'body', 'description': 'Connector type'},
            'created_on': {'type': 'Optional[int]', 'location': 'body', 'description': 'Created on'},
            'database_details': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'database details'},
            'database_properties': {'type': 'Optional[List[Dict[str, Any]]]', 'location': 'body', 'description': 'This will hold all the'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'Database description'},
            'tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'tags'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_name', 'database_display_name', 'database_type'],
    },
    'get_database': {
        'method': 'GET',
        'path': '/database_registrations/{database_id}',
        'description': 'Get database',
        'parameters': {
            'database_id': {'type': 'str', 'location': 'path', 'description': 'database id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_id'],
    },
    'delete_database_catalog': {
        'method': 'DELETE',
        'path': '/database_registrations/{database_id}',
        'description': 'Delete database',
        'parameters': {
            'database_id': {'type': 'str', 'location': 'path', 'description': 'database id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_id'],
    },
    'update_database': {
        'method': 'PATCH',
        'path': '/database_registrations/{database_id}',
        'description': 'Update database',
        'content_type': 'application/json-patch+json',
        'parameters': {
            'database_id': {'type': 'str', 'location': 'path', 'description': 'database id'},
            'body': {'type': 'List[Dict[str, Any]]', 'location': 'payload', 'description': 'Request body'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_id', 'body'],
    },
    'validate_database_connection': {
        'method': 'POST',
        'path': '/test_database_connection',
        'description': 'Validate database connection',
        'content_type': 'application/json',
        'parameters': {
            'database_details': {'type': 'Dict[str, Any]', 'location': 'body', 'description': 'database details'},
            'database_type': {'type': 'str', 'location': 'body', 'description': 'Type of db connection'},
            'certificate': {'type': 'Optional[str]', 'location': 'body', 'description': 'contents of a pem/crt file'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['database_details', 'database_type'],
    },

    # ================================================================================
    # ENGINE OPERATIONS
    # ================================================================================
    'list_db2_engines': {
        'method': 'GET',
        'path': '/db2_engines',
        'description': 'Get list of db2 engines',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'create_db2_engine': {
        'method': 'POST',
        'path': '/db2_engines',
        'description': 'Create db2 engine',
        'content_type': 'application/json',
        'parameters': {
            'origin': {'type': 'str', 'location': 'body', 'description': 'Origin - created or registered'},
            'type': {'type': 'str', 'location': 'body', 'description': 'Engine type'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine description'},
            'engine_details': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'External engine details'},
            'engine_display_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine display name'},
            'tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'Tags'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['origin', 'type'],
    },
    'delete_db2_engine': {
        'method': 'DELETE',
        'path': '/db2_engines/{engine_id}',
        'description': 'Delete db2 engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'update_db2_engine': {
        'method': 'PATCH',
        'path': '/db2_engines/{engine_id}',
        'description': 'Update db2 engine',
        'content_type': 'application/json-patch+json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'body': {'type': 'List[Dict[str, Any]]', 'location': 'payload', 'description': 'Update Engine Body'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'body'],
    },
    'list_engines': {
        'method': 'GET',
        'path': '/engines',
        'description': 'Get all engines',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'get_deployments': {
        'method': 'GET',
        'path': '/instance',
        'description': 'Get deployments',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'list_netezza_engines': {
        'method': 'GET',
        'path': '/netezza_engines',
        'description': 'Get list of netezza engines',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'create_netezza_engine': {
        'method': 'POST',
        'path': '/netezza_engines',
        'description': 'Create netezza engine',
        'content_type': 'application/json',
        'parameters': {
            'origin': {'type': 'str', 'location': 'body', 'description': 'Origin - created or registered'},
            'type': {'type': 'str', 'location': 'body', 'description': 'Engine type'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine description'},
            'engine_details': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'External engine details'},
            'engine_display_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine display name'},
            'tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'Tags'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['origin', 'type'],
    },
    'delete_netezza_engine': {
        'method': 'DELETE',
        'path': '/netezza_engines/{engine_id}',
        'description': 'Delete netezza engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'update_netezza_engine': {
        'method': 'PATCH',
        'path': '/netezza_engines/{engine_id}',
        'description': 'Update netezza engine',
        'content_type': 'application/json-patch+json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'body': {'type': 'List[Dict[str, Any]]', 'location': 'payload', 'description': 'Update Engine Body'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'body'],
    },
    'list_other_engines': {
        'method': 'GET',
        'path': '/other_engines',
        'description': 'List other engines',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'create_other_engine': {
        'method': 'POST',
        'path': '/other_engines',
        'description': 'Create other engine',
        'content_type': 'application/json',
        'parameters': {
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'engine description'},
            'engine_details': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'External engine details'},
            'engine_display_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'engine display name'},
            'tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'other engine tags'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'delete_other_engine': {
        'method': 'DELETE',
        'path': '/other_engines/{engine_id}',
        'description': 'Delete engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'list_presto_engines': {
        'method': 'GET',
        'path': '/presto_engines',
        'description': 'Get list of presto engines',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'create_engine': {
        'method': 'POST',
        'path': '/presto_engines',
        'description': 'Create presto engine',
        'content_type': 'application/json',
        'parameters': {
            'origin': {'type': 'str', 'location': 'body', 'description': 'Origin - created or registered'},
            'type': {'type': 'str', 'location': 'body', 'description': 'Engine type presto, others like netezza'},
            'associated_catalogs': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'Associated catalogs'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine description'},
            'engine_details': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'Node details'},
            'engine_display_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine display name'},
            'first_time_use': {'type': 'Optional[bool]', 'location': 'body', 'description': 'Optional parameter for UI - set as true when first time use'},
            'region': {'type': 'Optional[str]', 'location': 'body', 'description': 'Region (cloud)'},
            'tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'Tags'},
            'version': {'type': 'Optional[str]', 'location': 'body', 'description': 'Version like 0.278 for presto or else'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['origin', 'type'],
    },
    'get_presto_engine': {
        'method': 'GET',
        'path': '/presto_engines/{engine_id}',
        'description': 'Get presto engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'delete_engine': {
        'method': 'DELETE',
        'path': '/presto_engines/{engine_id}',
        'description': 'Delete presto engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'update_engine': {
        'method': 'PATCH',
        'path': '/presto_engines/{engine_id}',
        'description': 'Update presto engine',
        'content_type': 'application/json-patch+json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'body': {'type': 'List[Dict[str, Any]]', 'location': 'payload', 'description': 'Update Engine Body'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'body'],
    },
    'list_presto_engine_catalogs': {
        'method': 'GET',
        'path': '/presto_engines/{engine_id}/catalogs',
        'description': 'Get presto engine catalogs',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'replace_presto_engine_catalogs': {
        'method': 'PUT',
        'path': '/presto_engines/{engine_id}/catalogs',
        'description': 'Associate catalogs to presto engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'catalog_names': {'type': 'str', 'location': 'query', 'description': 'comma separated catalog names'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_names'],
    },
    'delete_presto_engine_catalogs': {
        'method': 'DELETE',
        'path': '/presto_engines/{engine_id}/catalogs',
        'description': 'Disassociate catalogs from a presto engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'catalog_names': {'type': 'str', 'location': 'query', 'description': 'Catalog id(s) to be stopped, comma separated'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_names'],
    },
    'get_presto_engine_catalog': {
        'method': 'GET',
        'path': '/presto_engines/{engine_id}/catalogs/{catalog_id}',
        'description': 'Get presto engine catalog',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'catalog id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_id'],
    },
    'create_engine_pause': {
        'method': 'POST',
        'path': '/presto_engines/{engine_id}/pause',
        'description': 'Pause presto engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'run_explain_statement': {
        'method': 'POST',
        'path': '/presto_engines/{engine_id}/query_explain',
        'description': 'Explain query',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'Engine id'},
            'statement': {'type': 'str', 'location': 'body', 'description': 'Presto query to determine explain plan'},
            'format': {'type': 'Optional[str]', 'location': 'body', 'description': 'Format'},
            'type': {'type': 'Optional[str]', 'location': 'body', 'description': 'Type'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'statement'],
    },
    'run_explain_analyze_statement': {
        'method': 'POST',
        'path': '/presto_engines/{engine_id}/query_explain_analyze',
        'description': 'Explain analyze',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'Engine id'},
            'statement': {'type': 'str', 'location': 'body', 'description': 'Presto query to show explain analyze'},
            'verbose': {'type': 'Optional[bool]', 'location': 'body', 'description': 'Verbose'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'statement'],
    },
    'create_engine_restart': {
        'method': 'POST',
        'path': '/presto_engines/{engine_id}/restart',
        'description': 'Restart a presto engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'create_engine_resume': {
        'method': 'POST',
        'path': '/presto_engines/{engine_id}/resume',
        'description': 'Resume presto engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'create_engine_scale': {
        'method': 'POST',
        'path': '/presto_engines/{engine_id}/scale',
        'description': 'Scale a presto engine',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'coordinator': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'NodeDescription'},
            'worker': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'NodeDescription'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'list_spark_engines': {
        'method': 'GET',
        'path': '/spark_engines',
        'description': 'List all spark engines',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'create_spark_engine': {
        'method': 'POST',
        'path': '/spark_engines',
        'description': 'Create spark engine',
        'content_type': 'application/json',
        'parameters': {
            'origin': {'type': 'str', 'location': 'body', 'description': 'Origin - created or registered'},
            'type': {'type': 'str', 'location': 'body', 'description': 'Engine type spark, others like netezza'},
            'description': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine description'},
            'engine_details': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'Node details'},
            'engine_display_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine display name'},
            'tags': {'type': 'Optional[List[str]]', 'location': 'body', 'description': 'Tags'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['origin', 'type'],
    },
    'delete_spark_engine': {
        'method': 'DELETE',
        'path': '/spark_engines/{engine_id}',
        'description': 'Delete spark engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'update_spark_engine': {
        'method': 'PATCH',
        'path': '/spark_engines/{engine_id}',
        'description': 'Update spark engine',
        'content_type': 'application/json-patch+json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'body': {'type': 'List[Dict[str, Any]]', 'location': 'payload', 'description': 'Update Engine Body'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'body'],
    },
    'list_spark_engine_applications': {
        'method': 'GET',
        'path': '/spark_engines/{engine_id}/applications',
        'description': 'List all applications in a spark engine',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id'],
    },
    'create_spark_engine_application': {
        'method': 'POST',
        'path': '/spark_engines/{engine_id}/applications',
        'description': 'Submit engine applications',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'application_details': {'type': 'Dict[str, Any]', 'location': 'body', 'description': 'Application details'},
            'job_endpoint': {'type': 'Optional[str]', 'location': 'body', 'description': 'Job endpoint'},
            'service_instance_id': {'type': 'Optional[str]', 'location': 'body', 'description': 'Service Instance ID for POST'},
            'type': {'type': 'Optional[str]', 'location': 'body', 'description': 'Engine Type'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'application_details'],
    },
    'delete_spark_engine_applications': {
        'method': 'DELETE',
        'path': '/spark_engines/{engine_id}/applications',
        'description': 'Stop Spark Applications',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'application_id': {'type': 'str', 'location': 'query', 'description': 'Application id(s) to be stopped, comma separated'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'application_id'],
    },
    'get_spark_engine_application_status': {
        'method': 'GET',
        'path': '/spark_engines/{engine_id}/applications/{application_id}',
        'description': 'Get spark application',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'path', 'description': 'engine id'},
            'application_id': {'type': 'str', 'location': 'path', 'description': 'Application id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'application_id'],
    },
    'test_lh_console': {
        'method': 'GET',
        'path': '/ready',
        'description': 'Readiness API',
        'parameters': {},
        'required': [],
    },

    # ================================================================================
    # CATALOG, SCHEMA AND TABLE OPERATIONS
    # ================================================================================
    'list_catalogs': {
        'method': 'GET',
        'path': '/catalogs',
        'description': 'List all registered catalogs',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': [],
    },
    'get_catalog': {
        'method': 'GET',
        'path': '/catalogs/{catalog_id}',
        'description': 'Get catalog properties by catalog_id',
        'parameters': {
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'catalog ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_id'],
    },
    'list_schemas': {
        'method': 'GET',
        'path': '/catalogs/{catalog_id}/schemas',
        'description': 'List all schemas',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'Engine name'},
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'Catalog name'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_id'],
    },
    'create_schema': {
        'method': 'POST',
        'path': '/catalogs/{catalog_id}/schemas',
        'description': 'Create schema',
        'content_type': 'application/json',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'Engine name'},
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'Catalog name'},
            'custom_path': {'type': 'str', 'location': 'body', 'description': 'Path associated with bucket'},
            'schema_name': {'type': 'str', 'location': 'body', 'description': 'Schema name'},
            'bucket_name': {'type': 'Optional[str]', 'location': 'body', 'description': 'Bucket associated to metastore where schema will be added'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_id', 'custom_path', 'schema_name'],
    },
    'delete_schema': {
        'method': 'DELETE',
        'path': '/catalogs/{catalog_id}/schemas/{schema_id}',
        'description': 'Delete schema',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'Engine name'},
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'Catalog name'},
            'schema_id': {'type': 'str', 'location': 'path', 'description': 'URL encoded Schema name'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_id', 'schema_id'],
    },
    'list_tables': {
        'method': 'GET',
        'path': '/catalogs/{catalog_id}/schemas/{schema_id}/tables',
        'description': 'Get tables',
        'parameters': {
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'catalog id'},
            'schema_id': {'type': 'str', 'location': 'path', 'description': 'URL encoded schema name'},
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_id', 'schema_id', 'engine_id'],
    },
    'get_table': {
        'method': 'GET',
        'path': '/catalogs/{catalog_id}/schemas/{schema_id}/tables/{table_id}',
        'description': 'Get columns',
        'parameters': {
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'catalog id'},
            'schema_id': {'type': 'str', 'location': 'path', 'description': 'URL encoded schema name'},
            'table_id': {'type': 'str', 'location': 'path', 'description': 'URL encoded table name'},
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_id', 'schema_id', 'table_id', 'engine_id'],
    },
    'delete_table': {
        'method': 'DELETE',
        'path': '/catalogs/{catalog_id}/schemas/{schema_id}/tables/{table_id}',
        'description': 'Delete table',
        'parameters': {
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'catalog id'},
            'schema_id': {'type': 'str', 'location': 'path', 'description': 'URL encoded schema name'},
            'table_id': {'type': 'str', 'location': 'path', 'description': 'URL encoded table name'},
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'engine id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_id', 'schema_id', 'table_id', 'engine_id'],
    },
    'update_table': {
        'method': 'PATCH',
        'path': '/catalogs/{catalog_id}/schemas/{schema_id}/tables/{table_id}',
        'description': 'Alter table',
        'content_type': 'application/json-patch+json',
        'parameters': {
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'catalog id'},
            'schema_id': {'type': 'str', 'location': 'path', 'description': 'URL encoded schema name'},
            'table_id': {'type': 'str', 'location': 'path', 'description': 'URL encoded table name'},
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'engine id'},
            'body': {'type': 'List[Dict[str, Any]]', 'location': 'payload', 'description': 'Request body'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_id', 'schema_id', 'table_id', 'engine_id', 'body'],
    },
    'list_table_snapshots': {
        'method': 'GET',
        'path': '/catalogs/{catalog_id}/schemas/{schema_id}/tables/{table_id}/snapshots',
        'description': 'Get table snapshots',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'Engine name'},
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'Catalog ID'},
            'schema_id': {'type': 'str', 'location': 'path', 'description': 'Schema ID'},
            'table_id': {'type': 'str', 'location': 'path', 'description': 'Table ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_id', 'schema_id', 'table_id'],
    },
    'replace_snapshot': {
        'method': 'PUT',
        'path': '/catalogs/{catalog_id}/schemas/{schema_id}/tables/{table_id}/snapshots/{snapshot_id}',
        'description': 'Rollback snapshot',
        'parameters': {
            'engine_id': {'type': 'str', 'location': 'query', 'description': 'Engine name'},
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'Catalog ID'},
            'schema_id': {'type': 'str', 'location': 'path', 'description': 'Schema ID'},
            'table_id': {'type': 'str', 'location': 'path', 'description': 'Table ID'},
            'snapshot_id': {'type': 'str', 'location': 'path', 'description': 'Snapshot ID'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['engine_id', 'catalog_id', 'schema_id', 'table_id', 'snapshot_id'],
    },
    'update_sync_catalog': {
        'method': 'PATCH',
        'path': '/catalogs/{catalog_id}/sync',
        'description': 'External Iceberg table registration',
        'content_type': 'application/json-patch+json',
        'parameters': {
            'catalog_id': {'type': 'str', 'location': 'path', 'description': 'catalog ID'},
            'body': {'type': 'List[Dict[str, Any]]', 'location': 'payload', 'description': 'Request body'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['catalog_id', 'body'],
    },

    # ================================================================================
    # INGESTION OPERATIONS
    # ================================================================================
    'list_ingestion_jobs': {
        'method': 'GET',
        'path': '/lhingestion/api/v1/ingestion/jobs',
        'description': 'Get ingestion jobs',
        'parameters': {
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
            'start': {'type': 'Optional[str]', 'location': 'query', 'description': 'Page number of requested ingestion jobs'},
            'jobs_per_page': {'type': 'Optional[int]', 'location': 'query', 'description': 'Number of requested ingestion jobs'},
        },
        'required': [],
        'pagination': {'items': 'ingestion_jobs', 'cursor': 'start', 'page_size': 'jobs_per_page'},
    },
    'create_ingestion_jobs': {
        'method': 'POST',
        'path': '/lhingestion/api/v1/ingestion/jobs',
        'description': 'Create an ingestion job',
        'content_type': 'application/json',
        'parameters': {
            'job_id': {'type': 'str', 'location': 'body', 'description': 'Job ID of the job'},
            'source_data_files': {'type': 'str', 'location': 'body', 'description': 'Source data files of the job'},
            'target_table': {'type': 'str', 'location': 'body', 'description': 'Target table name in format catalog.schema.table'},
            'username': {'type': 'str', 'location': 'body', 'description': 'User submitting ingestion job'},
            'create_if_not_exist': {'type': 'Optional[bool]', 'location': 'body', 'description': 'Create new target table if it does not exist'},
            'csv_property': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'Ingestion CSV properties'},
            'engine_id': {'type': 'Optional[str]', 'location': 'body', 'description': 'ID of the spark engine to be used for ingestion'},
            'execute_config': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'Ingestion engine configuration'},
            'partition_by': {'type': 'Optional[str]', 'location': 'body', 'description': 'Partition by expression of the target table'},
            'schema': {'type': 'Optional[str]', 'location': 'body', 'description': 'Schema definition of the source table'},
            'source_file_type': {'type': 'Optional[str]', 'location': 'body', 'description': 'Source file types (parquet or csv or json)'},
            'validate_csv_header': {'type': 'Optional[bool]', 'location': 'body', 'description': 'Validate CSV header if the target table exist'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['job_id', 'source_data_files', 'target_table', 'username'],
    },
    'get_ingestion_job': {
        'method': 'GET',
        'path': '/lhingestion/api/v1/ingestion/jobs/{job_id}',
        'description': 'Get ingestion job',
        'parameters': {
            'job_id': {'type': 'str', 'location': 'path', 'description': 'ingestion job id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['job_id'],
    },
    'delete_ingestion_jobs': {
        'method': 'DELETE',
        'path': '/lhingestion/api/v1/ingestion/jobs/{job_id}',
        'description': 'Delete an ingestion job',
        'parameters': {
            'job_id': {'type': 'str', 'location': 'path', 'description': 'ingestion job id'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['job_id'],
    },
    'create_preview_ingestion_file': {
        'method': 'POST',
        'path': '/lhingestion/api/v1/preview_ingestion_file',
        'description': 'Generate a preview of source file(s)',
        'content_type': 'application/json',
        'parameters': {
            'source_data_files': {'type': 'str', 'location': 'body', 'description': 'Source data files of the preview'},
            'csv_property': {'type': 'Optional[Dict[str, Any]]', 'location': 'body', 'description': 'Preview CSV properties'},
            'source_file_type': {'type': 'Optional[str]', 'location': 'body', 'description': 'Source file types (parquet or csv or json)'},
            'auth_instance_id': {'type': 'Optional[str]', 'location': 'header', 'name': 'AuthInstanceId', 'description': 'Instance ID'},
        },
        'required': ['source_data_files'],
    },
}


API_VERSIONS: Dict[str, Dict[str, Dict[str, Any]]] = {
    'v1': LAKEHOUSE_V1_API_ENDPOINTS,
    'v2': LAKEHOUSE_API_ENDPOINTS,
}


def endpoints_for(api_version: str = SERVICE_VERSION) -> Dict[str, Dict[str, Any]]:
    """Return the endpoint table of ``api_version``.

    Raises:
        ValueError: If the API version is not supported
    """
    try:
        return API_VERSIONS[api_version]
    except KeyError:
        raise ValueError(
            f"Unsupported API version '{api_version}', expected one of: {', '.join(sorted(API_VERSIONS))}"
        ) from None


def api_version_of(base_url: str) -> str:
    """Infer the API version from the last segment of a service URL (``.../api/v1``)."""
    last_segment = base_url.rstrip('/').rsplit('/', 1)[-1]
    return last_segment if last_segment in API_VERSIONS else SERVICE_VERSION


def get_endpoint(operation_name: str, api_version: str = SERVICE_VERSION) -> Optional[Dict[str, Any]]:
    """Return the endpoint definition for ``operation_name``, if any."""
    return endpoints_for(api_version).get(operation_name)


def list_operations(api_version: str = SERVICE_VERSION) -> List[str]:
    """Return all operation names, sorted."""
    return sorted(endpoints_for(api_version))


def list_paged_operations(api_version: str = SERVICE_VERSION) -> List[str]:
    """Return the operations that support server-side paging."""
    return sorted(
        name for name, endpoint in endpoints_for(api_version).items() if "pagination" in endpoint
    )
