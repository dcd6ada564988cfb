"""Template texts shared by the registry tests. Indentation is significant."""

QUERY = """
        query tests { ...Test1 }
    """

INLINE_QUERY = """
        query tests { ...Inline2 }
    """

TEST1 = """
        fragment Test1 on Any {
            totalCount
            data {
                ...Test2
            }
        }
    """

TEST2 = """
        fragment Test2 on Any {
            id
            brand
            titles {
                ...Test4
            }
            images(subType: "Medium") {
                ...Test3
            }
        }
    """

TEST3 = """
        fragment Test3 on Any {
            url
            id
            type
            subType
        }
    """

TEST4 = """
        fragment Test4 on Any {
            name
        }
    """

INLINE1 = """
        url
        id
        type
        subType
    """

INLINE2 = """
        count
        data { ...Inline1 }
        extra { ...Inline3 }
    """

INLINE3 = """
        description
        { ...Inline1 }
    """

TEMPLATES = {
    "Test1": TEST1,
    "Test2": TEST2,
    "Test3": TEST3,
    "Test4": TEST4,
    "Inline1": INLINE1,
    "Inline2": INLINE2,
    "Inline3": INLINE3,
    "Query": QUERY,
    "InlineQuery": INLINE_QUERY,
}
