"""
Tests for the page repository.

Tests the store operations against an in-memory database.
"""

from pagesearch.database.repository import PageRecord, PageRepository


def _put(repository: PageRepository, filepath: str, page: int, text: str) -> int:
    return repository.put(PageRecord.create(filepath, page, text))


class TestPageRecord:
    """Tests for PageRecord construction."""

    def test_create_derives_searchable_content(self):
        """Test that the canonical form is derived from the original."""
        record = PageRecord.create("test.pdf", 3, "Año tras=añoÇ")

        assert record.id is None
        assert record.filepath == "test.pdf"
        assert record.page == 3
        assert record.original_content == "Año tras=añoÇ"
        assert record.searchable_content == "anotrasanoc"


class TestPageRepository:
    """Tests for PageRepository class."""

    def test_put_returns_id(self, repository: PageRepository):
        """Test inserting a single page."""
        doc_id = _put(repository, "test.pdf", 1, "testing")

        assert doc_id is not None
        assert doc_id > 0

    def test_put_allows_duplicate_pages(self, repository: PageRepository):
        """Test that (file, page) is not unique at the schema level."""
        _put(repository, "test.pdf", 1, "first")
        _put(repository, "test.pdf", 1, "second")

        assert repository.count() == 2

    def test_exists_for_file(self, repository: PageRepository):
        """Test existence check by file key."""
        assert not repository.exists_for_file("test.pdf")

        _put(repository, "test.pdf", 1, "testing")

        assert repository.exists_for_file("test.pdf")

    def test_delete_all_for_file(self, repository: PageRepository):
        """Test deleting every page of one file."""
        _put(repository, "delete.pdf", 1, "Page 1")
        _put(repository, "delete.pdf", 2, "Page 2")
        _put(repository, "keep.pdf", 1, "Keep this")

        deleted = repository.delete_all_for_file("delete.pdf")

        assert deleted == 2
        assert repository.exists_for_file("keep.pdf")
        assert not repository.exists_for_file("delete.pdf")

    def test_delete_unknown_file_is_noop(self, repository: PageRepository):
        """Test that deleting a file with no pages removes nothing."""
        assert repository.delete_all_for_file("missing.pdf") == 0

    def test_list_distinct_files(self, repository: PageRepository):
        """Test that indexed files are listed once each."""
        assert repository.list_distinct_files() == []

        _put(repository, "test.pdf", 1, "testing")
        _put(repository, "test.pdf", 2, "testing")
        assert repository.list_distinct_files() == ["test.pdf"]

        _put(repository, "test2.pdf", 1, "testing")
        _put(repository, "test2.pdf", 2, "testing")
        files = repository.list_distinct_files()

        assert len(files) == 2
        assert "test.pdf" in files

    def test_find_by_substring_scoped_to_file(self, repository: PageRepository):
        """Test that matches come only from the requested file."""
        _put(repository, "a.pdf", 1, "shared words")
        _put(repository, "b.pdf", 1, "shared words")

        results = repository.find_by_substring("a.pdf", "shared")

        assert [r.filepath for r in results] == ["a.pdf"]

    def test_find_by_substring_ordered_by_page(self, repository: PageRepository):
        """Test that results come back in page order."""
        _put(repository, "a.pdf", 3, "match three")
        _put(repository, "a.pdf", 1, "match one")
        _put(repository, "a.pdf", 2, "no")

        results = repository.find_by_substring("a.pdf", "match")

        assert [r.page for r in results] == [1, 3]
        assert results[0].original_content == "match one"

    def test_find_by_substring_treats_wildcards_literally(self, repository: PageRepository):
        """Test that % and _ in the substring are not LIKE wildcards."""
        _put(repository, "a.pdf", 1, "abc")

        assert repository.find_by_substring("a.pdf", "a_c") == []
        assert repository.find_by_substring("a.pdf", "%") == []

    def test_get_by_file(self, repository: PageRepository):
        """Test getting all pages for a file."""
        for page in range(1, 4):
            _put(repository, "multi.pdf", page, f"Page {page} content")

        pages = repository.get_by_file("multi.pdf")

        assert [p.page for p in pages] == [1, 2, 3]
        assert pages[0].searchable_content == "page1content"

    def test_count_methods(self, repository: PageRepository):
        """Test count and count_files methods."""
        _put(repository, "file1.pdf", 1, "Page 1 of file 1")
        _put(repository, "file1.pdf", 2, "Page 2 of file 1")
        _put(repository, "file2.pdf", 1, "Page 1 of file 2")

        assert repository.count() == 3
        assert repository.count_files() == 2
