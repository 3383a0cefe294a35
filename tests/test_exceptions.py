"""Tests for srtstudio.exceptions module."""

from srtstudio.exceptions import (
    EditorError, EmptyDocumentError, InvalidInputFileError, PersistenceError,
    SearchPatternError, SrtStudioError, StructuralEditError,
)


class TestExceptionHierarchy:
    def test_base_error(self):
        e = SrtStudioError('test', error_code='E001')
        assert e.message == 'test'
        assert e.error_code == 'E001'
        assert '[E001]' in str(e)

    def test_to_dict(self):
        e = SrtStudioError('msg', error_code='X', details={'key': 'val'})
        d = e.to_dict()
        assert d['error_type'] == 'SrtStudioError'
        assert d['error_code'] == 'X'
        assert d['details'] == {'key': 'val'}

    def test_inheritance(self):
        assert issubclass(EditorError, SrtStudioError)
        for cls in (InvalidInputFileError, EmptyDocumentError, StructuralEditError,
                    SearchPatternError, PersistenceError):
            assert issubclass(cls, EditorError)

    def test_default_codes(self):
        assert InvalidInputFileError('x').error_code == 'INP_ERR'
        assert EmptyDocumentError('x').error_code == 'EMPTY_DOC'
        assert StructuralEditError('x').error_code == 'STRUCT_ERR'
        assert PersistenceError('x').error_code == 'PERSIST_ERR'

    def test_original_error(self):
        orig = OSError('disk full')
        e = PersistenceError('wrap', original_error=orig)
        assert e.original_error is orig
        assert 'disk full' in str(e)
