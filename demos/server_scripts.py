"""
JavaScript bodies of the server-side scripts registered by the demos.

Stored procedures, triggers and UDFs run inside the database engine and
are sent to the service as source text.
"""

# =============================================================================
# STORED PROCEDURES
# =============================================================================

SP_HELLO_WORLD = """
function spHelloWorld() {
    var context = getContext();
    var response = context.getResponse();
    response.setBody('Hello, World');
}
"""

SP_SET_NORTH_AMERICA = """
function spSetNorthAmerica(docToCreate, enforceSchema) {
    // Set the isNorthAmerica flag from the country in the address
    var country = docToCreate.address.countryRegionName;
    if (country) {
        var lcCountry = country.toLowerCase();
        docToCreate.address.isNorthAmerica =
            (lcCountry == 'united states' || lcCountry == 'canada' || lcCountry == 'mexico');
    }
    else if (enforceSchema) {
        throw new Error('Expected document to contain address.countryRegionName property');
    }

    var context = getContext();
    var collection = context.getCollection();
    var response = context.getResponse();

    var accepted = collection.createDocument(collection.getSelfLink(), docToCreate, {},
        function (err, docCreated) {
            if (err) throw new Error('Error creating document: ' + err.message);
            response.setBody(docCreated);
        });

    if (!accepted) throw new Error('Request to create document was not accepted');
}
"""

SP_ENSURE_UNIQUE_ID = """
function spEnsureUniqueId(docToCreate) {
    var context = getContext();
    var collection = context.getCollection();
    var response = context.getResponse();
    var baseId = docToCreate.id;
    var counter = 0;

    createDocument();

    function createDocument() {
        var accepted = collection.createDocument(collection.getSelfLink(), docToCreate,
            function (err, docCreated) {
                if (err) {
                    if (err.number == 409) {
                        counter++;
                        docToCreate.id = baseId + '_' + counter;
                        createDocument();
                    }
                    else {
                        throw new Error('Error creating document: ' + err.message);
                    }
                }
                else {
                    response.setBody(docCreated);
                }
            });

        if (!accepted) throw new Error('Request to create document was not accepted');
    }
}
"""

SP_BULK_INSERT = """
function spBulkInsert(docs) {
    if (!docs) throw new Error('Documents array is null or not defined!');

    var context = getContext();
    var collection = context.getCollection();
    var response = context.getResponse();
    var docCount = docs.length;

    if (docCount == 0) {
        response.setBody(0);
        return;
    }

    var count = 0;
    createDoc(docs[0]);

    function createDoc(doc) {
        var isAccepted = collection.createDocument(collection.getSelfLink(), doc, docCreated);
        if (!isAccepted) {
            // Out of time: report how many were inserted so the caller can resume
            response.setBody(count);
        }
    }

    function docCreated(err, doc) {
        if (err) throw err;
        count++;
        if (count == docCount) response.setBody(count);
        else createDoc(docs[count]);
    }
}
"""

SP_BULK_DELETE = """
function spBulkDelete(sql) {
    var context = getContext();
    var collection = context.getCollection();
    var response = context.getResponse();
    var responseBody = { deleted: 0, continuation: true };

    queryAndDelete();

    function queryAndDelete(continuation) {
        var isAccepted = collection.queryDocuments(collection.getSelfLink(), sql,
            { continuation: continuation },
            function (err, documents, options) {
                if (err) throw err;
                if (documents.length > 0) {
                    deleteDocuments(documents);
                }
                else if (options.continuation) {
                    queryAndDelete(options.continuation);
                }
                else {
                    responseBody.continuation = false;
                    response.setBody(responseBody);
                }
            });

        if (!isAccepted) response.setBody(responseBody);
    }

    function deleteDocuments(documents) {
        if (documents.length == 0) {
            queryAndDelete();
            return;
        }
        var isAccepted = collection.deleteDocument(documents[0]._self, {}, function (err) {
            if (err) throw err;
            responseBody.deleted++;
            documents.shift();
            deleteDocuments(documents);
        });

        if (!isAccepted) response.setBody(responseBody);
    }
}
"""

STORED_PROCEDURES = {
    "spHelloWorld": SP_HELLO_WORLD,
    "spSetNorthAmerica": SP_SET_NORTH_AMERICA,
    "spEnsureUniqueId": SP_ENSURE_UNIQUE_ID,
    "spBulkInsert": SP_BULK_INSERT,
    "spBulkDelete": SP_BULK_DELETE,
}

# =============================================================================
# TRIGGERS
# =============================================================================

TRG_VALIDATE_DOCUMENT = """
function trgValidateDocument() {
    var context = getContext();
    var request = context.getRequest();
    var documentToCreate = request.getBody();

    // Reject documents without a name
    if (!documentToCreate.name) {
        throw new Error('Document must include a name');
    }

    documentToCreate.name = documentToCreate.name.trim();
    documentToCreate.validatedAt = new Date().toISOString();

    request.setBody(documentToCreate);
}
"""

TRG_UPDATE_METADATA = """
function trgUpdateMetadata() {
    var context = getContext();
    var collection = context.getCollection();
    var response = context.getResponse();
    var createdDocument = response.getBody();

    var metadataId = '_metadata_' + createdDocument.address.postalCode;
    var query = {
        query: 'SELECT * FROM c WHERE c.id = @id',
        parameters: [{ name: '@id', value: metadataId }]
    };

    var accepted = collection.queryDocuments(collection.getSelfLink(), query, function (err, results) {
        if (err) throw new Error('Error querying for metadata document: ' + err.message);

        var metadata = results.length > 0 ? results[0] : {
            id: metadataId,
            address: { postalCode: createdDocument.address.postalCode },
            demo: createdDocument.demo,
            documentCount: 0
        };
        metadata.documentCount++;
        metadata.lastDocumentId = createdDocument.id;

        var upserted = collection.upsertDocument(collection.getSelfLink(), metadata, function (err) {
            if (err) throw new Error('Error updating metadata document: ' + err.message);
        });
        if (!upserted) throw new Error('Request to update metadata document was not accepted');
    });

    if (!accepted) throw new Error('Request to query metadata document was not accepted');
}
"""

# id -> (body, trigger type, trigger operation)
TRIGGERS = {
    "trgValidateDocument": (TRG_VALIDATE_DOCUMENT, "Pre", "Create"),
    "trgUpdateMetadata": (TRG_UPDATE_METADATA, "Post", "Create"),
}

# =============================================================================
# USER DEFINED FUNCTIONS
# =============================================================================

UDF_REGEX = """
function udfRegEx(input, regex) {
    return input.match(regex);
}
"""

UDF_IS_NORTH_AMERICA = """
function udfIsNorthAmerica(country) {
    var lcCountry = country.toLowerCase();
    return lcCountry == 'united states' || lcCountry == 'canada' || lcCountry == 'mexico';
}
"""

UDF_FORMAT_CITY_STATE_ZIP = """
function udfFormatCityStateZip(doc) {
    var address = doc.address;
    return address.location.city + ', ' +
        address.location.stateProvinceName + ' ' +
        address.postalCode;
}
"""

USER_DEFINED_FUNCTIONS = {
    "udfRegEx": UDF_REGEX,
    "udfIsNorthAmerica": UDF_IS_NORTH_AMERICA,
    "udfFormatCityStateZip": UDF_FORMAT_CITY_STATE_ZIP,
}
