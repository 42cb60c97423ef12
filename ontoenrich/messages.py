"""User-facing message catalogue and lookup."""

MESSAGES: dict[str, str] = {
    "RootCmdShortDesc": "Ontology enrichment tool",
    "RootCmdLongDesc": (
        "Ontology is a command-line tool for enriching ontologies from various document formats.\n"
        "It accepts several input formats and can work with different LLM backends for analysis."
    ),
    "EnrichCmdShortDesc": "Enrich an ontology from input documents",
    "EnrichCmdLongDesc": (
        "The enrich command processes input documents to create or update an ontology.\n"
        "It can handle various input formats and work with different LLM backends for analysis."
    ),
    "ConfigFlagUsage": "config file (default is $HOME/.ontology.yaml)",
    "DebugFlagUsage": "enable debug mode",
    "SilentFlagUsage": "silent mode, only show errors",
    "InputFlagUsage": "input file or directory",
    "OutputFlagUsage": "output file for the enriched ontology",
    "FormatFlagUsage": "input format (auto-detected if not specified)",
    "LLMFlagUsage": "LLM backend to use for analysis",
    "LLMModelFlagUsage": "specific model for the chosen LLM",
    "PassesFlagUsage": "number of passes for ontology enrichment",
    "RecursiveFlagUsage": "process input directory recursively",
    "InitializingApplication": "Initializing Ontology application",
    "StartingEnrichProcess": "Starting ontology enrichment process",
    "EnrichProcessCompleted": "Ontology enrichment process completed",
    "ExecutingPipeline": "Executing ontology enrichment pipeline",
    "ErrorExecutingRootCmd": "Error executing root command",
    "ErrorExecutingPipeline": "Error executing pipeline",
    "ErrorCreatingPipeline": "Error creating pipeline",
    "ErrUnsupportedModel": "unsupported model",
    "ErrTranslationFailed": "translation failed",
    "ErrInvalidLLMType": "invalid LLM type",
    "ErrContextTooLong": "context is too long",
    "TranslationStarted": "Translation started",
    "TranslationRetry": "Translation retry",
    "TranslationCompleted": "Translation completed",
    "ErrCreateLogDir": "Failed to create log directory",
    "ErrOpenLogFile": "Failed to open log file",
    "ParseStarted": "Parsing started",
    "ParseFailed": "Parsing failed",
    "ParseCompleted": "Parsing completed",
    "MetadataExtractionFailed": "Metadata extraction failed",
    "PageParseFailed": "Failed to parse page",
    "TextExtractionFailed": "Failed to extract text from page",
    "ErrInvalidContent": "invalid content",
    "ErrTokenization": "tokenization error",
    "ErrReadingContent": "error reading content",
    "ErrTokenizerInitialization": "error initializing tokenizer",
    "ErrTokenCounting": "error counting tokens",
    "LogSegmentationStarted": "Segmentation started",
    "LogSegmentationCompleted": "Segmentation completed: %d segments",
    "LogContextGeneration": "Generating context",
    "LogMergingSegments": "Merging segments",
    "ErrReadConfigFile": "Failed to read config file: %v",
    "ErrParseConfigFile": "Failed to parse config file: %v",
    "StartingQuickStatementConversion": "Starting conversion to QuickStatement format",
    "QuickStatementConversionCompleted": "QuickStatement conversion completed",
    "StartingRDFConversion": "Starting conversion to RDF format",
    "RDFConversionCompleted": "RDF conversion completed",
    "StartingOWLConversion": "Starting conversion to OWL format",
    "OWLConversionCompleted": "OWL conversion completed",
    "ExistingOntologyFlagUsage": "path to an existing ontology file to enrich",
    "ErrAccessInput": "Failed to access input: %v",
    "ErrProcessingPass": "Error processing pass: %v",
    "ErrNoInputSpecified": (
        "No input specified. Please use --input flag to specify an input file or directory."
    ),
    "TranslationFailed": "Translation failed after maximum retries: %v",
    "RateLimitExceeded": "Rate limit exceeded. Waiting %v before retrying.",
    "StartingPipeline": "Starting pipeline execution",
    "StartingPass": "Starting pass %d",
    "PipelineCompleted": "Pipeline execution completed successfully",
    "SegmentProcessingError": "Error processing segment %d: %v",
    "ErrLoadExistingOntology": "Failed to load existing ontology",
    "ErrSavingResult": "Error saving result",
    "ErrSegmentContent": "Failed to segment content",
    "IncludePositionsFlagUsage": "Active to not include position information in the ontology",
    "ContextOutputFlagUsage": "Enable context output in JSON format",
    "ContextWordsFlagUsage": "Number of context words before and after each position",
}


def get_message(key: str) -> str:
    """Return the message for ``key`` with surrounding whitespace removed, or ``key`` itself if unknown."""
    message = MESSAGES.get(key)
    if message is None:
        return key
    return message.strip()