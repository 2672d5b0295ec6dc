from widgetpage.with_meta import with_meta


def test_empty():
    @with_meta
    class Test:
        def __init__(self, foo):
            assert foo == 'bar'

    Test('bar')


def test_constructor():
    @with_meta
    class Test:
        class Meta:
            foo = 'bar'

        def __init__(self, foo):
            assert foo == 'bar'

    # noinspection PyArgumentList
    Test()


def test_override():
    @with_meta
    class Test:
        class Meta:
            foo = 'bar'

        def __init__(self, foo):
            assert foo == 'baz'

    Test(foo='baz')


def test_inheritance():
    @with_meta
    class Test:
        class Meta:
            foo = 'bar'
            qux = 'quux'

        def __init__(self, foo, qux):
            self.foo = foo
            self.qux = qux

    class TestSubclass(Test):
        class Meta:
            foo = 'baz'

    # noinspection PyArgumentList
    t = TestSubclass()
    assert (t.foo, t.qux) == ('baz', 'quux')
    assert TestSubclass.get_meta() == dict(foo='baz', qux='quux')


def test_private_members_are_not_passed():
    @with_meta
    class Test:
        class Meta:
            _secret = 1
            foo = 'bar'

        def __init__(self, foo):
            self.foo = foo

    assert Test().foo == 'bar'
    assert Test.get_meta() == dict(_secret=1, foo='bar')


def test_no_add_init_kwargs():
    @with_meta(add_init_kwargs=False)
    class Test:
        class Meta:
            foo = 'bar'

        def __init__(self):
            pass

    Test()
    assert Test.get_meta() == dict(foo='bar')
