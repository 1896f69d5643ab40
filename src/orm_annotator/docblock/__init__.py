"""Generated docblock handling.

A generated block sits directly above the class declaration:
    /**
     * StartGeneratedWithDataObjectAnnotator
     *
     * @property string $Title
     *
     * EndGeneratedWithDataObjectAnnotator
     */
    class Page extends DataObject

Only the text between the two markers is owned by the annotator.
Anything outside them is preserved untouched.
"""

# Marker constants used by locator, upsert and cleanup
START_TAG = "StartGeneratedWithDataObjectAnnotator"
END_TAG = "EndGeneratedWithDataObjectAnnotator"
