from prime_count.main import main

raise SystemExit(main())
